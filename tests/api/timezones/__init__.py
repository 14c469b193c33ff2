"""Timezones endpoint suites."""
