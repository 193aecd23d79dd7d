import json

from compliance.models import RunOutcome, RunState
from reporting.response_builder import (
    MESSAGE_COMPLIANT,
    MESSAGE_MISSING,
    build_http_response,
    build_result,
)
from utils.errors import CatalogFetchError


def _done(missing):
    outcome = RunOutcome(missing=missing)
    for state in (RunState.CONFIGURING, RunState.FETCHING, RunState.EVALUATING,
                  RunState.NOTIFYING, RunState.DONE):
        outcome.advance(state)
    return outcome


def _failed(message):
    outcome = RunOutcome()
    outcome.advance(RunState.FETCHING)
    outcome.fail(CatalogFetchError(message))
    return outcome


class TestBuildResult:
    def test_success_with_missing(self):
        assert build_result(_done([2, 3])) == {"message": MESSAGE_MISSING, "missing": [2, 3]}

    def test_success_without_missing_list(self):
        assert build_result(_done([2, 3]), include_missing=False) == {"message": MESSAGE_MISSING}

    def test_fully_compliant(self):
        assert build_result(_done([])) == {"message": MESSAGE_COMPLIANT, "missing": []}

    def test_failure(self):
        assert build_result(_failed("Shopify API request failed.")) == {"error": "Shopify API request failed."}

    def test_unfinished_run_is_an_error(self):
        assert "error" in build_result(RunOutcome())


class TestBuildHttpResponse:
    def test_success(self):
        response = build_http_response(_done([2]))

        assert response["statusCode"] == 200
        assert response["headers"]["Content-Type"] == "application/json"
        assert json.loads(response["body"]) == {"message": MESSAGE_MISSING, "missing": [2]}

    def test_failure(self):
        response = build_http_response(_failed("boom"))

        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {"error": "boom"}
