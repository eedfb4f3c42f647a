import logging
from typing import Optional

import requests
from twilio.base.exceptions import TwilioException, TwilioRestException
from twilio.rest import Client

from sharecare.utils.phone_utils import to_e164

logger = logging.getLogger(__name__)


class SMSDeliveryError(Exception):
    """Raised when an SMS could not be handed to the gateway."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class SMSNotConfiguredError(SMSDeliveryError):
    pass


def _normalize_sender(from_number: str, default_region: str) -> str:
    from_number = (from_number or "").strip()
    if not from_number:
        return ""
    try:
        return to_e164(from_number, default_region)
    except ValueError:
        # Alphanumeric sender IDs and short codes are passed through as-is
        return from_number


class SMSService:
    def __init__(self, account_sid: str, auth_token: str, from_number: str,
                 app_name: str = "Multi-Resource Donation", client: Optional[Client] = None,
                 default_region: str = "IN"):
        self.from_number = _normalize_sender(from_number, default_region)
        self.app_name = app_name

        if client is not None:
            self.client = client
        elif account_sid and auth_token:
            self.client = Client(account_sid, auth_token)
        else:
            self.client = None

    @property
    def is_configured(self) -> bool:
        return self.client is not None and bool(self.from_number)

    def send_message(self, to_number: str, body: str) -> str:
        """Send an SMS and return the Twilio message SID."""
        if not self.is_configured:
            raise SMSNotConfiguredError("Twilio is not configured. Please contact administrator.")

        try:
            message = self.client.messages.create(
                body=body,
                from_=self.from_number,
                to=to_number
            )
        except TwilioRestException as e:
            logger.error("Twilio rejected SMS to %s (code %s): %s", to_number, e.code, e.msg)
            raise SMSDeliveryError(e.msg or "Failed to send SMS", code=e.code) from e
        except (TwilioException, requests.RequestException) as e:
            logger.error("Could not reach Twilio for SMS to %s: %s", to_number, e)
            raise SMSDeliveryError(f"Could not reach SMS gateway: {e}") from e

        logger.info("SMS sent to %s: %s", to_number, message.sid)
        return message.sid

    def send_otp(self, to_number: str, otp_code: str) -> str:
        """Send OTP code via SMS."""
        body = f"Your verification code for {self.app_name} is: {otp_code}"
        return self.send_message(to_number, body)
