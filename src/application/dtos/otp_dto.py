"""
OTP DTOs - Application Layer

Request and response bodies for OTP issuance and verification.
Fields are optional on the request side so that a missing email is
reported by the use case with the gateway's own message instead of a
framework validation error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SendOtpRequestDTO(BaseModel):
    """Body of POST /api/send-otp-email."""

    email: Optional[str] = Field(default=None, description="Recipient address")

    model_config = {"json_schema_extra": {"example": {"email": "jane@example.com"}}}


class VerifyOtpRequestDTO(BaseModel):
    """Body of POST /api/verify-otp-email."""

    email: Optional[str] = Field(default=None, description="Recipient address")
    otp: Optional[str] = Field(default=None, description="Code received by mail")

    model_config = {
        "json_schema_extra": {"example": {"email": "jane@example.com", "otp": "042817"}}
    }


class OtpResponseDTO(BaseModel):
    """Outcome of an OTP operation."""

    success: bool = Field(description="Whether the operation succeeded")
    message: str = Field(description="Human readable outcome")


class MessageDTO(BaseModel):
    """Plain message body used for client errors."""

    message: str = Field(description="Human readable message")
