"""
Runtime package for the Chad Log server.

This package contains:
- API layer (FastAPI server + routes)
- Stores (in-memory and SQLite log storage)
- Query engine (filtering, sorting, pagination)
- Models (Pydantic models for log entries and requests)
"""
