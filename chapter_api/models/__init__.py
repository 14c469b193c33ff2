"""
Data Models
===========

Pydantic models for API response bodies.
"""
