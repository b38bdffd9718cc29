"""
In-memory requester with canned responses, for demos and tests.
"""

import asyncio
import json
from typing import Any, Dict, List, Mapping, Optional, Union

import structlog

from .models import Response

logger = structlog.get_logger(__name__)

BASE_URL = 'http://www.smokeballdev.com'


def _quote(status: int, message: str) -> Response:
    return Response(status=status, body=json.dumps({'message': message}))


DEFAULT_RESPONSES: Dict[str, Response] = {
    f'{BASE_URL}/arnie0': _quote(200, 'Get to the chopper'),
    f'{BASE_URL}/arnie1': _quote(200, 'MY NAME IS NOT QUAID'),
    f'{BASE_URL}/arnie2': _quote(200, 'GET DOWN!'),
    f'{BASE_URL}/arnie3': _quote(500, 'Your request has been terminated'),
}


class MockRequester:
    """Serves canned responses by locator.

    Values may be ``Response`` objects or untyped ``{"status", "body"}``
    mappings, which are handed back unchanged. A locator listed in ``errors``
    raises that exception instead; ``delays`` sleeps before answering.
    """

    def __init__(
        self,
        responses: Optional[Mapping[str, Union[Response, Mapping[str, Any]]]] = None,
        delays: Optional[Mapping[str, float]] = None,
        errors: Optional[Mapping[str, BaseException]] = None,
    ):
        self.responses = dict(DEFAULT_RESPONSES if responses is None else responses)
        self.delays = dict(delays or {})
        self.errors = dict(errors or {})
        self.calls: List[str] = []

    async def request(self, locator: str):
        self.calls.append(locator)
        delay = self.delays.get(locator, 0)
        if delay:
            await asyncio.sleep(delay)

        if locator in self.errors:
            logger.debug("mock_request_failed", url=locator)
            raise self.errors[locator]
        if locator not in self.responses:
            raise KeyError(f"No canned response for {locator}")
        return self.responses[locator]
