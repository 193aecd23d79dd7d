from unittest.mock import MagicMock

import pytest
import requests

from conftest import make_response
from delivery import email_sender
from delivery.email_sender import POSTMARK_EMAIL_URL, send_report
from utils.errors import NotificationError


def test_send_report_skips_empty(config, session):
    assert send_report(config, [], session) is False
    session.post.assert_not_called()


def test_send_report_posts_email(config, session):
    session.post.return_value = make_response(json_data={"ErrorCode": 0, "MessageID": "m-1"})

    assert send_report(config, [2, 3], session) is True

    session.post.assert_called_once()
    call = session.post.call_args
    assert call.args[0] == POSTMARK_EMAIL_URL
    assert call.kwargs["headers"]["X-Postmark-Server-Token"] == "postmark-test-token"
    payload = call.kwargs["json"]
    assert payload["From"] == "bot@example.com"
    assert payload["To"] == "ops@example.com"
    assert payload["Subject"] == "Missing Tags Report"
    assert "2\n3\n" in payload["TextBody"]


@pytest.mark.parametrize("status", [401, 422, 500])
def test_send_report_error_status(config, session, status):
    session.post.return_value = make_response(status_code=status, text="denied")

    with pytest.raises(NotificationError) as exc_info:
        send_report(config, [1], session)

    assert exc_info.value.status_code == status


def test_send_report_postmark_error_code(config, session):
    session.post.return_value = make_response(
        json_data={"ErrorCode": 406, "Message": "Inactive recipient"}
    )

    with pytest.raises(NotificationError, match="Inactive recipient"):
        send_report(config, [1], session)


def test_send_report_transport_error(config, session):
    session.post.side_effect = requests.exceptions.Timeout("timed out")

    with pytest.raises(NotificationError, match="timed out"):
        send_report(config, [1], session)


def test_send_report_tolerates_empty_body(config, session):
    session.post.return_value = make_response(json_data=ValueError("no body"))

    assert send_report(config, [1], session) is True


def test_send_report_closes_own_session(config, mocker):
    fake_session = MagicMock()
    fake_session.post.return_value = make_response(json_data={"ErrorCode": 0})
    mocker.patch.object(email_sender.requests, "Session", return_value=fake_session)

    send_report(config, [1], None)

    fake_session.close.assert_called_once()
