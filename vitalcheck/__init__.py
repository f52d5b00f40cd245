"""Patient vitals range checking.

This package contains the range rules, the evaluator and its alert sinks,
isolated from any notification transport for easy testing and reasoning.
"""
