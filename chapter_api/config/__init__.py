"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Target API, credentials and fixture identifiers
- logging: Structured logging configuration
"""
