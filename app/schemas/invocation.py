from pydantic import BaseModel, field_validator
from typing import Any, Optional

class InvocationRequest(BaseModel):
    question: Optional[str] = None
    input: Optional[str] = None
    message: Optional[str] = None

    @field_validator("question", "input", "message", mode="before")
    @classmethod
    def ignore_non_text(cls, value: Any) -> Optional[str]:
        # A non-text value under one key must not reject a usable question under another.
        return value if isinstance(value, str) else None

    def resolve_question(self) -> str:
        # Literal emptiness only: whitespace-only text is forwarded as is.
        return self.question or self.input or self.message or ""

class InvocationResponse(BaseModel):
    reply: str
