"""
Exceptions raised by the quotes pipeline.

Transport failures are not wrapped: whatever the requester raises reaches the
caller unchanged.
"""


class QuotesError(Exception):
    """Base class for errors raised by this package."""


class MalformedResponseError(QuotesError):
    """A response could not be turned into a quote.

    Raised when the raw response lacks a usable status/body, or when the body
    is not JSON with a string ``message`` field.
    """

    def __init__(self, locator: str, reason: str):
        self.locator = locator
        self.reason = reason
        super().__init__(f"Malformed response for {locator}: {reason}")
