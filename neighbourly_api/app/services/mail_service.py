"""
Outbound email through the configured SMTP relay.

Messages are HTML-only and sent from ``"Neighbourly" <TRANSPORTER_EMAIL>``.
Handlers schedule :meth:`MailService.send_email` as a background task,
so delivery happens after the response has been returned and a failed
send is only logged.
"""

import logging
from email.message import EmailMessage
from email.utils import formataddr, formatdate, make_msgid
from typing import Optional, Tuple

import aiosmtplib

from ..core.config import settings


logger = logging.getLogger(__name__)


WELCOME_SUBJECT = "Welcome to Neighbourly"
WELCOME_MESSAGE = "Reliable Workers, Right at Your Doorstep. Thanks \U0001F33C"


def smtp_tls_mode(port: int) -> Tuple[bool, Optional[bool]]:
    """Return ``(use_tls, start_tls)`` for an SMTP port.

    465 is implicit TLS and 587 requires STARTTLS.  Any other port leaves
    ``start_tls`` as ``None`` so aiosmtplib upgrades whenever the server
    advertises STARTTLS.
    """
    if port == 465:
        return True, False
    if port == 587:
        return False, True
    return False, None


class MailService:
    """Service for composing and sending notification emails."""

    @classmethod
    def build_message(cls, address: str, subject: str, html: str) -> EmailMessage:
        """Compose the MIME message for a single recipient."""
        message = EmailMessage()
        message["From"] = formataddr((settings.mail_sender_name, settings.transporter_email))
        message["To"] = address
        message["Subject"] = subject
        message["Date"] = formatdate(localtime=True)
        message["Message-ID"] = make_msgid(domain=settings.transporter_email.partition("@")[2] or None)
        message.set_content(html, subtype="html")
        return message

    @classmethod
    async def send_email(cls, address: Optional[str], subject: str, html: str) -> bool:
        """Send one HTML email.

        Returns ``True`` when the relay accepted the message.  Missing
        recipient or sender configuration skips the send; SMTP and
        network errors are logged and reported as ``False``.
        """
        if not address:
            logger.warning("Skipping email %r: no recipient address", subject)
            return False
        if not settings.transporter_email:
            logger.warning("Skipping email %r to %s: TRANSPORTER_EMAIL is not set", subject, address)
            return False

        # Relays without auth (local testing) get no credentials at all
        username = settings.transporter_email if settings.transporter_pass else None
        password = settings.transporter_pass or None
        use_tls, start_tls = smtp_tls_mode(settings.smtp_port)
        try:
            # Header injection (newlines in an address) raises ValueError here
            message = cls.build_message(address, subject, html)
            _, response = await aiosmtplib.send(
                message,
                hostname=settings.smtp_host,
                port=settings.smtp_port,
                username=username,
                password=password,
                use_tls=use_tls,
                start_tls=start_tls,
                timeout=settings.smtp_timeout,
            )
        except (aiosmtplib.SMTPException, OSError, ValueError) as e:
            logger.error("Failed to send email %r to %s: %s", subject, address, e)
            return False
        logger.info("Email sent to %s: %s", address, response)
        return True
