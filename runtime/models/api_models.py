"""
HTTP request/response models for the Chad Log API.
"""

from pydantic import BaseModel, field_validator


class CreateLogRequest(BaseModel):
    message: str

    @field_validator("message")
    @classmethod
    def message_must_be_utf8(cls, message: str) -> str:
        # JSON escapes can smuggle in lone surrogates such as "\ud800",
        # which can be neither stored in SQLite nor written back out.
        try:
            message.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("message must be valid UTF-8 text")
        return message


class CountResponse(BaseModel):
    count: int


class PingResponse(BaseModel):
    """
    Same shape as a LogEntry so clients can decode it the same way,
    but never written to the store.
    """
    id: str
    timestamp: str
    message: str
