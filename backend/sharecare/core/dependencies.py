from datetime import timedelta

from sharecare.core.config import settings
from sharecare.services.otp_service import OTPService
from sharecare.services.sms_service import SMSService

# One store per process; restarting the API drops pending codes.
otp_service = OTPService(
    ttl=timedelta(minutes=settings.OTP_TTL_MINUTES),
    max_attempts=settings.OTP_MAX_ATTEMPTS,
)

sms_service = SMSService(
    account_sid=settings.TWILIO_ACCOUNT_SID,
    auth_token=settings.TWILIO_AUTH_TOKEN,
    from_number=settings.TWILIO_PHONE_NUMBER,
    app_name=settings.APP_NAME,
    default_region=settings.DEFAULT_PHONE_REGION,
)


def get_otp_service() -> OTPService:
    return otp_service


def get_sms_service() -> SMSService:
    return sms_service
