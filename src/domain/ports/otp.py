"""
OTP Collaborator Interfaces - Domain Layer

This module defines the interfaces for issuing one-time codes and
delivering them to their recipients.
"""

from abc import ABC, abstractmethod


class IOtpGenerator(ABC):
    """Interface for the one-time code issuer."""

    @abstractmethod
    async def create_otp(self, identity: str) -> str:
        """
        Issue a new code for the identity, replacing any previous one.

        Args:
            identity: Email address the code is bound to

        Returns:
            str: The generated numeric code
        """
        pass

    @abstractmethod
    async def verify_otp(self, identity: str, code: str) -> bool:
        """Check and consume the current code for the identity."""
        pass


class IMailSender(ABC):
    """Interface for the mail delivery collaborator."""

    @abstractmethod
    async def send_otp_email(self, recipient: str, name: str, code: str) -> None:
        """
        Deliver a code to the recipient.

        Raises:
            OtpDeliveryError: If the message cannot be delivered
        """
        pass
