"""
Fetch every URL concurrently and turn each response into a labeled quote.

All requests are scheduled before any is awaited. The join is all-or-nothing:
the first exception raised by the requester, or the first malformed response,
fails the whole call and no partial list is returned.
"""

import asyncio
from typing import Any, Dict, List, Mapping, Sequence, Union

from pydantic import ValidationError

from .errors import MalformedResponseError
from .fetcher import Requester
from .models import ArnieQuote, Failure, QuoteBody, Response, Result


async def transform(locators: Sequence[str], requester: Requester) -> List[Result]:
    """Request every locator at once and map the responses in input order."""
    if not locators:
        return []

    # gather keeps positional order regardless of completion order
    responses = await asyncio.gather(*(requester.request(locator) for locator in locators))

    return [
        _to_result(locator, response)
        for locator, response in zip(locators, responses)
    ]


async def get_arnie_quotes(urls: Sequence[str], requester: Requester) -> List[Dict[str, str]]:
    """Same as :func:`transform`, rendered as single-key records.

    ``[{"Arnie Quote": "..."}, {"FAILURE": "..."}]``
    """
    return [result.as_record() for result in await transform(urls, requester)]


def _to_result(locator: str, raw: Union[Response, Mapping[str, Any]]) -> Result:
    response = _coerce_response(locator, raw)

    try:
        message = QuoteBody.model_validate_json(response.body).message
    except ValidationError as e:
        raise MalformedResponseError(locator, f"invalid body: {e.errors()[0]['msg']}") from e

    if response.ok:
        return ArnieQuote(message)
    return Failure(message)


def _coerce_response(locator: str, raw: Union[Response, Mapping[str, Any]]) -> Response:
    if isinstance(raw, Response):
        return raw
    try:
        return Response.model_validate(raw)
    except ValidationError as e:
        raise MalformedResponseError(locator, f"invalid response: {e.errors()[0]['msg']}") from e
