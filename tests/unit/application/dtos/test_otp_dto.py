from __future__ import annotations

from src.application.dtos.otp_dto import (
    OtpResponseDTO,
    SendOtpRequestDTO,
    VerifyOtpRequestDTO,
)


def test_send_otp_request_allows_missing_email() -> None:
    assert SendOtpRequestDTO().email is None
    assert SendOtpRequestDTO.model_validate({}).email is None


def test_verify_otp_request_fields() -> None:
    dto = VerifyOtpRequestDTO.model_validate({"email": "a@b.c", "otp": "123456"})
    assert (dto.email, dto.otp) == ("a@b.c", "123456")


def test_otp_response_shape() -> None:
    body = OtpResponseDTO(success=False, message="SMTP down").model_dump()
    assert body == {"success": False, "message": "SMTP down"}
