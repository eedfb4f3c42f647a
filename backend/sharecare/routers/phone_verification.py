import logging

from fastapi import APIRouter, Depends, HTTPException

from sharecare.core.config import settings
from sharecare.core.dependencies import get_otp_service, get_sms_service
from sharecare.core.schemas import PhoneOTPRequest, PhoneOTPVerify, PhoneOTPSent, PhoneVerified
from sharecare.services.otp_service import OTPService
from sharecare.services.sms_service import SMSDeliveryError, SMSService
from sharecare.utils.phone_utils import to_e164

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["phone-verification"])

INVALID_PHONE_MESSAGE = "Invalid phone number format. Please enter a valid phone number."

# Twilio error codes that are the caller's fault rather than ours
TWILIO_CLIENT_ERRORS = {
    21266: "Invalid Twilio configuration: Sender and receiver numbers cannot be the same. "
           "Please check your Twilio phone number configuration.",
    21211: INVALID_PHONE_MESSAGE,
    21608: "This phone number is not verified. Please verify it in your Twilio account "
           "or use a different number.",
    21614: "Invalid Twilio phone number. Please check your Twilio configuration.",
}


def _format_phone(phone: str) -> str:
    try:
        return to_e164(phone, settings.DEFAULT_PHONE_REGION)
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_PHONE_MESSAGE)


@router.post("/send-phone-otp", response_model=PhoneOTPSent)
def send_phone_otp(
    request: PhoneOTPRequest,
    otp_service: OTPService = Depends(get_otp_service),
    sms_service: SMSService = Depends(get_sms_service),
):
    """Send OTP code to phone number for verification."""
    if not request.phone or not request.phone.strip():
        raise HTTPException(status_code=400, detail="Phone number is required")

    if sms_service.client is None:
        raise HTTPException(status_code=500, detail="Twilio is not configured. Please contact administrator.")
    if not sms_service.from_number:
        raise HTTPException(status_code=500, detail="Twilio phone number is not configured. Please contact administrator.")

    phone = _format_phone(request.phone)

    if phone == sms_service.from_number:
        raise HTTPException(
            status_code=400,
            detail="Cannot send OTP to the same number as Twilio sender. Please use a different phone number."
        )

    otp_code = otp_service.issue(phone)

    try:
        sms_service.send_otp(phone, otp_code)
    except SMSDeliveryError as e:
        # The user never received this code, don't leave it pending
        otp_service.clear(phone)
        logger.error("Error sending phone OTP to %s: %s", phone, e.message)
        if e.code in TWILIO_CLIENT_ERRORS:
            raise HTTPException(status_code=400, detail=TWILIO_CLIENT_ERRORS[e.code])
        if e.code is None:
            # Transport failure, the gateway message is not meant for end users
            raise HTTPException(status_code=500, detail="Failed to send OTP. Please try again.")
        raise HTTPException(status_code=500, detail=e.message or "Failed to send OTP. Please try again.")

    return PhoneOTPSent(
        message="OTP sent to your phone number",
        phone=phone,
        expiresIn=otp_service.remaining_seconds(phone),
    )


@router.post("/verify-phone-otp", response_model=PhoneVerified)
def verify_phone_otp(
    request: PhoneOTPVerify,
    otp_service: OTPService = Depends(get_otp_service),
):
    """Verify phone OTP."""
    if not request.phone or not request.otp:
        raise HTTPException(status_code=400, detail="Phone number and OTP are required")

    phone = _format_phone(request.phone)
    result = otp_service.verify(phone, request.otp.strip())

    if not result.success:
        detail = {"message": result.message}
        if result.can_request_new_otp:
            detail["canRequestNewOTP"] = True
        raise HTTPException(status_code=400, detail=detail)

    return PhoneVerified(message="Phone number verified successfully", phone=phone)


@router.get("/phone-otp-debug/{phone}")
def phone_otp_debug(phone: str, otp_service: OTPService = Depends(get_otp_service)):
    """Inspect the pending OTP for a phone (development only)."""
    if not settings.DEBUG:
        raise HTTPException(status_code=404, detail="Not Found")

    snapshot = otp_service.snapshot(_format_phone(phone))
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No pending OTP for this phone")
    return snapshot
