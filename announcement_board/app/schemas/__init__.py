"""Pydantic schema definitions for request and response bodies."""
