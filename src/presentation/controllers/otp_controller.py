"""
OTP Router - Presentation Layer

This module defines the endpoints that send and verify one-time
passcodes delivered by email.
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.dtos.otp_dto import (
    MessageDTO,
    OtpResponseDTO,
    SendOtpRequestDTO,
    VerifyOtpRequestDTO,
)
from src.application.use_cases.otp_use_cases import (
    SendOtpEmailUseCase,
    VerifyOtpUseCase,
)
from src.domain.entities.errors import InvalidIdentityError, OtpVerificationError
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["OTP"])


@router.post(
    "/send-otp-email",
    response_model=OtpResponseDTO,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageDTO},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": OtpResponseDTO},
    },
)
@inject
async def send_otp_email(
    payload: Optional[SendOtpRequestDTO] = None,
    send_otp_email_use_case: SendOtpEmailUseCase = Depends(
        Provide["send_otp_email_use_case"]
    ),
) -> OtpResponseDTO | JSONResponse:
    """
    Generate a one-time passcode and email it to the caller.

    Args:
        payload: Request body carrying the recipient email
        send_otp_email_use_case: Injected use case for OTP delivery

    Returns:
        OtpResponseDTO on success, otherwise a JSON error response:
        400 when the email is missing, 500 when generation or delivery fails
    """
    email = payload.email if payload else None

    try:
        return await send_otp_email_use_case.execute(email)

    except InvalidIdentityError as e:
        logger.info("otp.send.rejected", reason=e.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=MessageDTO(message=e.message).model_dump(),
        )

    except Exception as e:
        logger.error("otp.send.failure", recipient=email, error=str(e), exc_info=e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=OtpResponseDTO(success=False, message=str(e)).model_dump(),
        )


@router.post(
    "/verify-otp-email",
    response_model=OtpResponseDTO,
    responses={status.HTTP_400_BAD_REQUEST: {"model": OtpResponseDTO}},
)
@inject
async def verify_otp_email(
    payload: Optional[VerifyOtpRequestDTO] = None,
    verify_otp_use_case: VerifyOtpUseCase = Depends(Provide["verify_otp_use_case"]),
) -> OtpResponseDTO | JSONResponse:
    """Check a code previously sent to the email address."""
    email = payload.email if payload else None
    otp = payload.otp if payload else None

    try:
        return await verify_otp_use_case.execute(email, otp)
    except (InvalidIdentityError, OtpVerificationError) as e:
        logger.info("otp.verify.rejected", recipient=email, reason=e.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=OtpResponseDTO(success=False, message=e.message).model_dump(),
        )
