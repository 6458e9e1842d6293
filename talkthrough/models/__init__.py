"""Pydantic schemas for domain values and API contracts."""
