"""
OTP Use Cases - Application Layer

This module issues one-time passcodes, hands them to the mail
collaborator and checks submitted codes.
"""

from typing import Optional

from src.application.dtos.otp_dto import OtpResponseDTO
from src.domain.entities.errors import InvalidIdentityError, OtpVerificationError
from src.domain.ports.otp import IMailSender, IOtpGenerator
from src.shared import get_logger

logger = get_logger(__name__)


class SendOtpEmailUseCase:
    """Issue a code for an email address and deliver it."""

    def __init__(
        self,
        otp_generator: IOtpGenerator,
        mail_sender: IMailSender,
        recipient_name: str = "User",
    ) -> None:
        self._otp_generator = otp_generator
        self._mail_sender = mail_sender
        self._recipient_name = recipient_name

    async def execute(self, email: Optional[str]) -> OtpResponseDTO:
        """
        Generate and send a code.

        Args:
            email: Recipient address taken from the request body

        Returns:
            OtpResponseDTO: Success acknowledgment naming the recipient

        Raises:
            InvalidIdentityError: If no email was supplied. No collaborator
                is called in that case.
            Exception: Any failure raised by the generator or the mail sender
        """
        if not email or not email.strip():
            raise InvalidIdentityError()

        code = await self._otp_generator.create_otp(email)
        await self._mail_sender.send_otp_email(email, self._recipient_name, code)

        logger.info("otp.dispatched", recipient=email)
        return OtpResponseDTO(success=True, message=f"OTP sent to {email}")


class VerifyOtpUseCase:
    """Check a submitted code against the one issued for the address."""

    def __init__(self, otp_generator: IOtpGenerator) -> None:
        self._otp_generator = otp_generator

    async def execute(self, email: Optional[str], otp: Optional[str]) -> OtpResponseDTO:
        if not email or not otp:
            raise InvalidIdentityError("Email and OTP required")

        if not await self._otp_generator.verify_otp(email, otp.strip()):
            raise OtpVerificationError(details={"recipient": email})

        return OtpResponseDTO(success=True, message="OTP verified")
