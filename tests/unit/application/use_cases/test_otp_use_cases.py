from __future__ import annotations

import pytest

from src.application.use_cases.otp_use_cases import (
    SendOtpEmailUseCase,
    VerifyOtpUseCase,
)
from src.domain.entities.errors import (
    InvalidIdentityError,
    OtpDeliveryError,
    OtpVerificationError,
)
from tests.conftest import FakeMailSender


@pytest.mark.asyncio
async def test_send_generates_and_delivers(fake_otp_generator, fake_mail_sender):
    use_case = SendOtpEmailUseCase(fake_otp_generator, fake_mail_sender, "Customer")

    result = await use_case.execute("jane@example.com")

    assert result.success is True
    assert result.message == "OTP sent to jane@example.com"
    assert fake_otp_generator.issued == ["jane@example.com"]
    assert fake_mail_sender.sent == [("jane@example.com", "Customer", "123456")]


@pytest.mark.asyncio
@pytest.mark.parametrize("email", [None, "", "   "])
async def test_send_without_email_calls_no_collaborator(
    email, fake_otp_generator, fake_mail_sender
):
    use_case = SendOtpEmailUseCase(fake_otp_generator, fake_mail_sender)

    with pytest.raises(InvalidIdentityError) as excinfo:
        await use_case.execute(email)

    assert excinfo.value.message == "Email required"
    assert fake_otp_generator.issued == []
    assert fake_mail_sender.sent == []


@pytest.mark.asyncio
async def test_send_propagates_delivery_failure(fake_otp_generator):
    sender = FakeMailSender(error=OtpDeliveryError("SMTP server unavailable"))
    use_case = SendOtpEmailUseCase(fake_otp_generator, sender)

    with pytest.raises(OtpDeliveryError, match="SMTP server unavailable"):
        await use_case.execute("jane@example.com")


@pytest.mark.asyncio
async def test_each_request_issues_a_new_code(fake_otp_generator, fake_mail_sender):
    use_case = SendOtpEmailUseCase(fake_otp_generator, fake_mail_sender)

    await use_case.execute("jane@example.com")
    await use_case.execute("jane@example.com")

    assert len(fake_otp_generator.issued) == 2
    assert len(fake_mail_sender.sent) == 2


@pytest.mark.asyncio
async def test_verify_accepts_matching_code(fake_otp_generator):
    result = await VerifyOtpUseCase(fake_otp_generator).execute(
        "jane@example.com", " 123456 "
    )
    assert result.success is True
    assert fake_otp_generator.verified == [("jane@example.com", "123456")]


@pytest.mark.asyncio
async def test_verify_rejects_wrong_code(fake_otp_generator):
    with pytest.raises(OtpVerificationError, match="Invalid or expired OTP"):
        await VerifyOtpUseCase(fake_otp_generator).execute("jane@example.com", "0")


@pytest.mark.asyncio
async def test_verify_requires_email_and_code(fake_otp_generator):
    with pytest.raises(InvalidIdentityError, match="Email and OTP required"):
        await VerifyOtpUseCase(fake_otp_generator).execute("jane@example.com", None)
    assert fake_otp_generator.verified == []
