# lambda_handler.py
from utils.logging_config import setup_logging

# Initialize logging first
logger = setup_logging()

import requests

from compliance.models import RunOutcome, RunState
from compliance.tag_checker import find_non_compliant
from delivery.email_sender import send_report
from reporting.response_builder import build_http_response, build_result
from scanner.catalog_fetcher import fetch_all_products
from utils.config_loader import load_config
from utils.errors import TagCheckError


def _run_stage(name, func, *args):
    """Run one pipeline stage, returning (value, error) instead of raising."""
    try:
        logger.info(f"Starting {name}")
        value = func(*args)
        logger.info(f"Completed {name}")
        return value, None
    except TagCheckError as exc:
        logger.error(f"Error in {name}: {exc}")
        return None, exc
    except Exception as exc:
        logger.error(f"Unexpected error in {name}: {exc}", exc_info=True)
        error = TagCheckError(f"Unexpected error in {name}: {exc}")
        error.stage = name
        return None, error


def run_check(environ=None, session=None):
    """Run one compliance check: configure, fetch, evaluate, notify."""
    outcome = RunOutcome()

    outcome.advance(RunState.CONFIGURING)
    config, error = _run_stage("load_config", load_config, environ)
    if error:
        outcome.fail(error)
        return outcome

    own_session = session is None
    session = session or requests.Session()
    try:
        outcome.advance(RunState.FETCHING)
        products, error = _run_stage("fetch_products", fetch_all_products, config, session)
        if error:
            outcome.fail(error)
            return outcome
        outcome.products_scanned = len(products)

        outcome.advance(RunState.EVALUATING)
        missing, error = _run_stage(
            "find_non_compliant", find_non_compliant, products, config.required_tags
        )
        if error:
            outcome.fail(error)
            return outcome
        outcome.missing = missing
        logger.info(f"Products missing required tags: {missing}")

        outcome.advance(RunState.NOTIFYING)
        sent, error = _run_stage("send_report", send_report, config, missing, session)
        if error:
            outcome.fail(error)
            return outcome
        outcome.email_sent = sent
    finally:
        if own_session:
            session.close()

    outcome.advance(RunState.DONE)
    return outcome


def is_http_event(event):
    """API Gateway (REST or HTTP API) and function URL events carry request metadata."""
    if not isinstance(event, dict):
        return False
    if "httpMethod" in event:
        return True
    return "http" in (event.get("requestContext") or {})


def handler(event, context):
    """Main Lambda handler for the Shopify tag check."""
    logger.info("Shopify tag check started")
    logger.info(f"Event: {event}")

    outcome = run_check()

    logger.info(
        f"Shopify tag check finished: state={outcome.state.value} "
        f"products={outcome.products_scanned} missing={len(outcome.missing)} "
        f"email_sent={outcome.email_sent}"
    )

    if is_http_event(event):
        return build_http_response(outcome)
    return build_result(outcome, include_missing=False)
