"""Domain models for vitals checking."""
