"""SMTP implementation of the Notifier port."""

from __future__ import annotations

import smtplib
from email.message import EmailMessage
from email.utils import formataddr

import structlog

from ordersvc.application.notifier import Notifier
from ordersvc.domain.exceptions import NotificationError
from ordersvc.infrastructure.config import Settings

logger = structlog.get_logger(__name__)


class SmtpNotifier(Notifier):
    """Relays plain-text mail through the SMTP server named in settings.

    Opens one connection per message. STARTTLS and login are used when
    configured; the connection carries ``smtp_timeout`` so a dead relay
    cannot hold a request forever.
    """

    def __init__(self, settings: Settings) -> None:
        if not settings.smtp_host:
            raise ValueError("SMTP_HOST is not configured")
        self._settings = settings

    def send(self, to: str, subject: str, body: str) -> None:
        s = self._settings
        try:
            message = EmailMessage()
            message["From"] = formataddr((s.smtp_from_name, s.smtp_from_email))
            message["To"] = to
            message["Subject"] = subject
            message.set_content(body)

            with smtplib.SMTP(s.smtp_host, s.smtp_port, timeout=s.smtp_timeout) as smtp:
                if s.smtp_starttls:
                    smtp.starttls()
                if s.smtp_user and s.smtp_password:
                    smtp.login(s.smtp_user, s.smtp_password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError, ValueError) as exc:
            raise NotificationError(f"Could not send email to {to}: {exc}") from exc

        logger.info("Email sent", to=to, subject=subject)


class LogNotifier(Notifier):
    """Writes messages to the log instead of sending them.

    Used when no SMTP relay is configured, e.g. in development.
    """

    def send(self, to: str, subject: str, body: str) -> None:
        logger.info("Email not sent (no SMTP relay configured)", to=to, subject=subject, body=body)
