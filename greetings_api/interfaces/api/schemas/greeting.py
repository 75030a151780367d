"""Schemas for the greetings endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class GreetingRead(BaseModel):
    message: str = Field(..., description="Greeting text returned to the caller")

    model_config = ConfigDict(from_attributes=True, extra="forbid")
