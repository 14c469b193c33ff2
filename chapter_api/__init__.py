"""
Chapter API Tests
=================

Integration test suite for the job orchestration REST API: schedules,
environment variables, task triggering, runs and timezones.
"""

__version__ = "1.0.0"
