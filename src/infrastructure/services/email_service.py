"""
SMTP Email Service - Infrastructure Layer

Delivers one-time passcodes over SMTP. ``smtplib`` is blocking, so the
send runs in a worker thread.
"""

from __future__ import annotations

import asyncio
import smtplib
from email.message import EmailMessage
from typing import Optional

from src.domain.entities.errors import OtpDeliveryError
from src.domain.ports.otp import IMailSender
from src.shared import get_logger

logger = get_logger(__name__)

OTP_SUBJECT = "Your OTP Code"


class SmtpEmailService(IMailSender):
    """Mail sender for OTP messages."""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout: float = 10.0,
        ttl_seconds: int = 300,
    ):
        """
        Initialize the SMTP sender.

        Args:
            host: SMTP server host
            port: SMTP server port
            sender: Address used in the From header
            username: Login user, skipped when empty
            password: Login password
            use_tls: Issue STARTTLS before authenticating
            timeout: Socket timeout for the whole exchange
            ttl_seconds: Code validity mentioned in the message body
        """
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout
        self.ttl_seconds = ttl_seconds

    async def send_otp_email(self, recipient: str, name: str, code: str) -> None:
        """
        Send the code to the recipient.

        Raises:
            OtpDeliveryError: If the SMTP exchange fails
        """
        message = self.build_message(recipient, name, code)

        logger.info("otp.email.sending", recipient=recipient, host=self.host)
        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                "otp.email.failed",
                recipient=recipient,
                host=self.host,
                error=str(e),
                exc_info=e,
            )
            raise OtpDeliveryError(
                str(e) or f"Failed to send OTP email to {recipient}",
                details={"recipient": recipient},
            ) from e

        logger.info("otp.email.sent", recipient=recipient)

    def build_message(self, recipient: str, name: str, code: str) -> EmailMessage:
        minutes = max(1, self.ttl_seconds // 60)
        message = EmailMessage()
        message["Subject"] = OTP_SUBJECT
        message["From"] = self.sender
        message["To"] = recipient
        message.set_content(
            f"Hello {name},\n\n"
            f"Your one-time passcode is {code}.\n"
            f"It expires in {minutes} minutes. Do not share it with anyone.\n"
        )
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username:
                smtp.login(self.username, self.password or "")
            smtp.send_message(message)
