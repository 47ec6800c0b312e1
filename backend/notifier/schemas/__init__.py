"""API Schemas — Pydantic models for job payloads and responses."""
