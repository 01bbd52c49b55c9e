"""Schemas: Pydantic models for payloads crossing the process boundary."""
