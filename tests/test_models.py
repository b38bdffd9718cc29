import pytest
from pydantic import ValidationError

from quotes.models import FAILURE_LABEL, SUCCESS_LABEL, ArnieQuote, Failure, QuoteBody, Response


def test_records_have_a_single_label_key() -> None:
    assert ArnieQuote("Get to the chopper").as_record() == {SUCCESS_LABEL: "Get to the chopper"}
    assert Failure("Internal error").as_record() == {FAILURE_LABEL: "Internal error"}
    assert SUCCESS_LABEL == "Arnie Quote"
    assert FAILURE_LABEL == "FAILURE"


def test_results_are_compared_by_kind_and_message() -> None:
    assert ArnieQuote("x") == ArnieQuote("x")
    assert ArnieQuote("x") != Failure("x")


def test_response_ok_only_for_200() -> None:
    assert Response(status=200, body="").ok
    assert not Response(status=204, body="").ok


def test_response_requires_status_and_body() -> None:
    with pytest.raises(ValidationError):
        Response.model_validate({"status": 200})


def test_quote_body_rejects_invalid_json() -> None:
    with pytest.raises(ValidationError):
        QuoteBody.model_validate_json("not-json")


@pytest.mark.parametrize("status", ["200", 200.0, True])
def test_response_status_is_not_coerced(status) -> None:
    with pytest.raises(ValidationError):
        Response.model_validate({"status": status, "body": "{}"})
