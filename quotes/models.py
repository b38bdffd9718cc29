"""
Data shapes for the fetch-and-transform pipeline: the raw response handed back
by a requester, its JSON body, and the tagged result produced per locator.
"""

from dataclasses import dataclass
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict

SUCCESS_LABEL = "Arnie Quote"
FAILURE_LABEL = "FAILURE"


class Response(BaseModel):
    """Status code and raw body returned for one locator.

    Strict: a status of "200", 200.0 or True is a malformed response.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    status: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status == 200


class QuoteBody(BaseModel):
    """JSON payload of a response. Only ``message`` is read."""

    message: str


@dataclass(frozen=True)
class ArnieQuote:
    message: str
    label = SUCCESS_LABEL

    def as_record(self) -> Dict[str, str]:
        return {self.label: self.message}


@dataclass(frozen=True)
class Failure:
    message: str
    label = FAILURE_LABEL

    def as_record(self) -> Dict[str, str]:
        return {self.label: self.message}


Result = Union[ArnieQuote, Failure]
