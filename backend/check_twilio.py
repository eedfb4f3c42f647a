#!/usr/bin/env python3
"""
Script to check the Twilio SMS configuration by sending a test message
"""
from sharecare.core.config import settings
from sharecare.core.dependencies import sms_service
from sharecare.services.sms_service import SMSDeliveryError
from sharecare.utils.phone_utils import to_e164


def check_twilio_config():
    """Check Twilio configuration and send a test message."""
    print("🔍 Checking Twilio Configuration...")
    print("=" * 50)

    print(f"📋 TWILIO_ACCOUNT_SID: {'✅ Set' if settings.TWILIO_ACCOUNT_SID else '❌ Missing'}")
    print(f"🔑 TWILIO_AUTH_TOKEN: {'✅ Set' if settings.TWILIO_AUTH_TOKEN else '❌ Missing'}")
    print(f"📞 TWILIO_PHONE_NUMBER: {settings.TWILIO_PHONE_NUMBER or '❌ Missing'}")

    if settings.TWILIO_ACCOUNT_SID:
        print(f"📋 Account SID (first 8 chars): {settings.TWILIO_ACCOUNT_SID[:8]}...")

    print("\n" + "=" * 50)

    if not sms_service.is_configured:
        print("❌ SMS service not properly configured!")
        return False

    print("✅ SMS service configured successfully!")

    test_number = input("\n📱 Enter a test phone number (format: +919876543210): ").strip()
    if not test_number:
        print("❌ No test number provided")
        return False

    try:
        test_number = to_e164(test_number, settings.DEFAULT_PHONE_REGION)
    except ValueError:
        print("❌ Invalid phone number")
        return False

    print(f"\n📤 Sending test message to {test_number}...")

    try:
        sid = sms_service.send_message(
            test_number,
            f"Test message from {settings.APP_NAME}. If you receive this, SMS delivery is working."
        )
    except SMSDeliveryError as e:
        print(f"❌ Failed to send test message (code {e.code}): {e.message}")
        return False

    print(f"✅ Test message sent successfully! SID: {sid}")
    return True


if __name__ == "__main__":
    check_twilio_config()
