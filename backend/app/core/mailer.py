# app/core/mailer.py
import html
import logging
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr
from enum import Enum
from typing import Optional

from app.core.settings import Settings
from app.lib.contact_validation import Submission

log = logging.getLogger("uvicorn.error")

DEFAULT_SMTP_HOST = "mail.privateemail.com"
SENDER_NAME = "Contact Form"


@dataclass(frozen=True)
class SmtpConfig:
    host: str
    port: int
    user: str
    password: Optional[str]
    target_email: str
    timeout: float = 20.0

    @property
    def secure(self) -> bool:
        return self.port == 465

    @classmethod
    def from_settings(cls, s: Settings) -> "SmtpConfig":
        target = s.contact_target_email
        return cls(
            host=s.smtp_host or DEFAULT_SMTP_HOST,
            port=s.smtp_port,
            user=s.smtp_user or target,
            password=s.smtp_pass or None,
            target_email=target,
            timeout=s.smtp_timeout,
        )


class RelayFailure(str, Enum):
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"


@dataclass(frozen=True)
class RelayResult:
    ok: bool
    failure: Optional[RelayFailure] = None
    detail: Optional[str] = None

    @classmethod
    def sent(cls) -> "RelayResult":
        return cls(ok=True)

    @classmethod
    def failed(cls, failure: RelayFailure, detail: str) -> "RelayResult":
        return cls(ok=False, failure=failure, detail=detail)


def _header_safe(value: str) -> str:
    return value.replace("\r", "").replace("\n", " ").strip()


def build_message(submission: Submission, config: SmtpConfig) -> EmailMessage:
    first = _header_safe(submission.first_name or "")
    last = _header_safe(submission.last_name or "")
    email = _header_safe(submission.email or "")
    body = submission.message or ""

    msg = EmailMessage()
    msg["From"] = formataddr((SENDER_NAME, config.user))
    msg["To"] = config.target_email
    # formataddr only takes ASCII addresses; skip Reply-To for internationalized ones
    if email.isascii():
        msg["Reply-To"] = formataddr((f"{first} {last}", email))
    msg["Subject"] = f"New Contact Form Submission from {first} {last}"

    msg.set_content(
        f"Name: {first} {last}\n"
        f"Email: {email}\n"
        f"Message: {body}\n"
    )
    msg.add_alternative(
        "<h3>New Contact Form Submission</h3>\n"
        f"<p><strong>Name:</strong> {html.escape(first)} {html.escape(last)}</p>\n"
        f"<p><strong>Email:</strong> {html.escape(email)}</p>\n"
        "<p><strong>Message:</strong></p>\n"
        f"<p>{html.escape(body).replace(chr(10), '<br>')}</p>\n",
        subtype="html",
    )
    return msg


def _deliver(msg: EmailMessage, config: SmtpConfig) -> None:
    ctx = ssl.create_default_context()
    if config.secure:
        with smtplib.SMTP_SSL(config.host, config.port, timeout=config.timeout, context=ctx) as smtp:
            smtp.login(config.user, config.password)
            smtp.send_message(msg)
        return

    with smtplib.SMTP(config.host, config.port, timeout=config.timeout) as smtp:
        smtp.ehlo()
        if smtp.has_extn("starttls"):
            smtp.starttls(context=ctx)
            smtp.ehlo()
        smtp.login(config.user, config.password)
        smtp.send_message(msg)


def send_submission(submission: Submission, config: SmtpConfig) -> RelayResult:
    """Email a validated submission to the configured recipient.

    Never raises for message-building, SMTP or network failures; inspect the returned result.
    """
    if not config.password:
        log.error("[mailer] SMTP_PASS environment variable is not set")
        return RelayResult.failed(RelayFailure.CONFIGURATION, "Email configuration error")

    log.info(f"[mailer] Attempting to send email using: {config.host}:{config.port}")
    try:
        msg = build_message(submission, config)
        _deliver(msg, config)
    except (smtplib.SMTPException, OSError, ValueError) as exc:
        log.warning(f"[mailer] send failed via {config.host}:{config.port}: {exc}")
        return RelayResult.failed(RelayFailure.TRANSPORT, str(exc) or exc.__class__.__name__)

    log.info(f"[mailer] Email sent successfully to {config.target_email}")
    return RelayResult.sent()
