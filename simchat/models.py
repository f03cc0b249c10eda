
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal

Role = Literal["user", "assistant"]


class Message(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    role: Role
    content: str


class ChatRequest(BaseModel):
    messages: List[Message] = Field(..., description="Full conversation history, oldest first")


class ChatResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
