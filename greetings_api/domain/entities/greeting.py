from dataclasses import dataclass


@dataclass(frozen=True)
class Greeting:
    """Represents the message returned by the greetings endpoint."""

    message: str
