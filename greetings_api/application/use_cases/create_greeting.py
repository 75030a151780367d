"""Use cases for producing greeting messages."""

from greetings_api.domain.entities.greeting import Greeting


DEFAULT_GREETING = "Hello from Spring Boot"


def create_greeting() -> Greeting:
    """Return the greeting served by ``GET /greetings``.

    The message is constant; nothing about the incoming request changes it.
    """

    return Greeting(message=DEFAULT_GREETING)
