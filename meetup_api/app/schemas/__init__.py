"""
Pydantic schema definitions for API payloads.

Schemas are separated from database models to decouple API
representation from persistence.
"""
