import pytest

import talenthub.services.notifications as notifications
from talenthub.core.errors import UpstreamFailureError
from talenthub.services.notifications import (
    LoggingNotificationSender,
    SesNotificationSender,
    build_contact_message,
    contact_candidate,
)


class _FakeSes:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def send_email(self, **kwargs):
        if self.fail:
            raise RuntimeError("MessageRejected")
        self.calls.append(kwargs)
        return {"MessageId": "msg-1"}


def test_build_contact_message_subject_and_escaping():
    msg = build_contact_message(
        "cand@example.com", "Sam <b>", "Rita", "Backend Engineer", "Hello & welcome\n<script>x</script>"
    )
    assert msg.subject == "Message from Rita regarding Backend Engineer position"
    assert msg.to_email == "cand@example.com"
    assert "Sam &lt;b&gt;" in msg.html_body
    assert "<script>" not in msg.html_body
    assert "Hello &amp; welcome" in msg.html_body
    assert "Hello & welcome" in msg.text_body


def test_logging_sender_records_message():
    sender = LoggingNotificationSender()
    contact_candidate(sender, "cand@example.com", "Sam", "Rita", "Engineer", "Hi")
    assert len(sender.sent) == 1
    assert sender.sent[0].subject == "Message from Rita regarding Engineer position"


def test_ses_sender_builds_send_email_request():
    client = _FakeSes()
    sender = SesNotificationSender(sender="TalentHub <hr@example.com>", client=client)
    contact_candidate(sender, "cand@example.com", "Sam", "Rita", "Engineer", "Hi")
    call = client.calls[0]
    assert call["Source"] == "TalentHub <hr@example.com>"
    assert call["Destination"] == {"ToAddresses": ["cand@example.com"]}
    assert call["Message"]["Subject"]["Data"] == "Message from Rita regarding Engineer position"
    assert "Hi" in call["Message"]["Body"]["Text"]["Data"]
    assert "Hi" in call["Message"]["Body"]["Html"]["Data"]


def test_provider_failure_becomes_upstream_error():
    sender = SesNotificationSender(client=_FakeSes(fail=True))
    with pytest.raises(UpstreamFailureError, match="Failed to send contact email"):
        contact_candidate(sender, "cand@example.com", "Sam", "Rita", "Engineer", "Hi")


def test_sender_selection_follows_settings(monkeypatch):
    monkeypatch.setattr(notifications.settings, "notifications_enabled", False)
    assert isinstance(notifications.get_notification_sender(), LoggingNotificationSender)
    monkeypatch.setattr(notifications.settings, "notifications_enabled", True)
    assert isinstance(notifications.get_notification_sender(), SesNotificationSender)
