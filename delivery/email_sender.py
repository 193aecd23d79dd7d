# delivery/email_sender.py
import logging

import requests

from reporting.report_builder import build_report
from utils.errors import NotificationError

logger = logging.getLogger(__name__)

POSTMARK_EMAIL_URL = "https://api.postmarkapp.com/email"


def _post_email(config, payload, session):
    try:
        response = session.post(
            POSTMARK_EMAIL_URL,
            json=payload,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                "X-Postmark-Server-Token": config.postmark_token,
            },
            timeout=config.timeout,
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"Postmark request failed: {e}")
        raise NotificationError(f"Email API request failed: {e}") from e

    if response.status_code >= 400:
        logger.error(f"Postmark API error {response.status_code}: {response.text[:200]}")
        raise NotificationError(
            f"Email API request failed with status {response.status_code}",
            status_code=response.status_code,
        )

    try:
        body = response.json()
    except ValueError:
        body = {}

    # Postmark reports some rejections with ErrorCode != 0
    error_code = body.get("ErrorCode", 0) if isinstance(body, dict) else 0
    if error_code:
        raise NotificationError(
            f"Email API rejected the message: {body.get('Message', 'unknown error')} (code {error_code})",
            status_code=response.status_code,
        )
    return body if isinstance(body, dict) else {}


def send_report(config, missing_ids, session=None):
    """Email the ids of non-compliant products.

    Does nothing and returns False when there is nothing to report.
    Raises NotificationError when the email API does not accept the message.
    """
    if not missing_ids:
        logger.info("No products missing required tags, skipping email")
        return False

    payload = {
        "From": config.email_from,
        "To": config.email_to,
        "Subject": config.email_subject,
        "TextBody": build_report(missing_ids, config.store_domain, config.required_tags),
    }

    own_session = session is None
    session = session or requests.Session()

    logger.info(f"Sending report of {len(missing_ids)} products to {config.email_to}")
    try:
        body = _post_email(config, payload, session)
    finally:
        if own_session:
            session.close()

    logger.info(f"Report email sent, MessageID={body.get('MessageID')}")
    return True
