"""
Test suites package.

Kept importable so the framework can be used from `run_tests.py`,
IDE navigation and the unit tests alike.
"""
