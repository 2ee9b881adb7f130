"""
Outbound e-mail to candidates.

Core code depends only on the NotificationSender interface; the SES
implementation is chosen at runtime from settings and can be swapped for the
logging sender in development and tests.
"""
import html
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

import boto3

from talenthub.config import settings
from talenthub.core.errors import UpstreamFailureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContactMessage:
    to_email: str
    subject: str
    html_body: str
    text_body: str


class NotificationSender(Protocol):
    def send(self, message: ContactMessage) -> None: ...


class LoggingNotificationSender:
    """Records messages in the log instead of delivering them."""

    def __init__(self) -> None:
        self.sent: list[ContactMessage] = []

    def send(self, message: ContactMessage) -> None:
        self.sent.append(message)
        logger.info("Notification (not delivered) to=%s subject=%r", message.to_email, message.subject)


@lru_cache(maxsize=1)
def _ses_client():
    return boto3.client("ses", region_name=settings.aws_region)


class SesNotificationSender:
    def __init__(self, sender: str | None = None, client=None) -> None:
        self.sender = sender or settings.ses_sender
        self._client = client

    @property
    def client(self):
        return self._client or _ses_client()

    def send(self, message: ContactMessage) -> None:
        resp = self.client.send_email(
            Source=self.sender,
            Destination={"ToAddresses": [message.to_email]},
            Message={
                "Subject": {"Data": message.subject, "Charset": "UTF-8"},
                "Body": {
                    "Html": {"Data": message.html_body, "Charset": "UTF-8"},
                    "Text": {"Data": message.text_body, "Charset": "UTF-8"},
                },
            },
        )
        logger.info("SES message sent to=%s id=%s", message.to_email, resp.get("MessageId"))


def get_notification_sender() -> NotificationSender:
    if settings.notifications_enabled:
        return SesNotificationSender()
    return LoggingNotificationSender()


def build_contact_message(
    candidate_email: str,
    candidate_name: str,
    recruiter_name: str,
    job_title: str,
    message: str,
) -> ContactMessage:
    subject = f"Message from {recruiter_name} regarding {job_title} position"
    e = html.escape
    html_body = f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #333;">Message from Recruiter</h2>
  <p>Dear {e(candidate_name)},</p>
  <p>You have received a message from <strong>{e(recruiter_name)}</strong> regarding the <strong>{e(job_title)}</strong> position.</p>
  <div style="background-color: #f8f9fa; padding: 20px; border-radius: 8px; margin: 20px 0; border-left: 4px solid #007bff;">
    <h3 style="color: #333; margin-top: 0;">Message:</h3>
    <p style="white-space: pre-line; color: #555;">{e(message)}</p>
  </div>
  <p style="color: #666;">If you would like to respond, please reply to this email or contact the recruiter directly.</p>
  <hr style="border: none; border-top: 1px solid #eee; margin: 30px 0;">
  <p style="color: #999; font-size: 12px;">This message was sent through the TalentHub recruitment platform.</p>
</div>
""".strip()
    text_lines = [
        f"Dear {candidate_name},",
        "",
        f"You have received a message from {recruiter_name} regarding the {job_title} position.",
        "",
        message,
        "",
        "This message was sent through the TalentHub recruitment platform.",
    ]
    return ContactMessage(
        to_email=candidate_email,
        subject=subject,
        html_body=html_body,
        text_body="\n".join(text_lines),
    )


def contact_candidate(
    sender: NotificationSender,
    candidate_email: str,
    candidate_name: str,
    recruiter_name: str,
    job_title: str,
    message: str,
) -> None:
    msg = build_contact_message(candidate_email, candidate_name, recruiter_name, job_title, message)
    try:
        sender.send(msg)
    except Exception as e:
        logger.exception("Failed to send contact email to %s: %s", candidate_email, e)
        raise UpstreamFailureError("Failed to send contact email") from e
