"""Routes serving the greeting message."""

import logging

from fastapi import APIRouter

from greetings_api.application.use_cases.create_greeting import create_greeting
from greetings_api.domain.entities import Greeting
from greetings_api.interfaces.api.schemas import GreetingRead

router = APIRouter(prefix="/greetings", tags=["greetings"])

logger = logging.getLogger(__name__)


def _greeting_to_read_model(greeting: Greeting) -> GreetingRead:
    return GreetingRead.model_validate(greeting)


@router.api_route("", methods=["GET", "HEAD"], response_model=GreetingRead)
async def read_greeting() -> GreetingRead:
    """Return the greeting message.

    Query parameters and request bodies are ignored.
    """

    greeting = create_greeting()
    logger.debug("Serving greeting: %s", greeting.message)
    return _greeting_to_read_model(greeting)


__all__ = ["router"]
