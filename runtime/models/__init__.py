"""
Pydantic models used by the Chad Log runtime.

Split into:
- log_models: LogEntry + LogQuery
- api_models: HTTP request/response schemas
"""
