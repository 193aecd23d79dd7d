# reporting/response_builder.py
import json

MESSAGE_MISSING = "Check complete."
MESSAGE_COMPLIANT = "Check complete. All products have a required tag."


def build_result(outcome, include_missing=True):
    """Build the JSON result of a run: {message, missing?} or {error}."""
    if not outcome.succeeded:
        error = outcome.error
        return {"error": error.message if error is not None else "Compliance run did not complete"}

    result = {"message": MESSAGE_MISSING if outcome.missing else MESSAGE_COMPLIANT}
    if include_missing:
        result["missing"] = list(outcome.missing)
    return result


def build_http_response(outcome):
    """Wrap the result in an API Gateway proxy response."""
    return {
        "statusCode": 200 if outcome.succeeded else 500,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(build_result(outcome, include_missing=True)),
    }
