import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings read from the environment (and a local .env file)."""

    def __init__(self):
        self.APP_NAME = os.getenv("APP_NAME", "Multi-Resource Donation")
        self.DEBUG = _as_bool(os.getenv("DEBUG", "false"))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
            if origin.strip()
        ]

        # Twilio
        self.TWILIO_ACCOUNT_SID = os.getenv("TWILIO_ACCOUNT_SID", "")
        self.TWILIO_AUTH_TOKEN = os.getenv("TWILIO_AUTH_TOKEN", "")
        self.TWILIO_PHONE_NUMBER = os.getenv("TWILIO_PHONE_NUMBER", "").strip()

        # Phone verification
        self.DEFAULT_PHONE_REGION = os.getenv("DEFAULT_PHONE_REGION", "IN")
        self.OTP_TTL_MINUTES = int(os.getenv("OTP_TTL_MINUTES", "10"))
        self.OTP_MAX_ATTEMPTS = int(os.getenv("OTP_MAX_ATTEMPTS", "3"))
        self.OTP_SWEEP_INTERVAL_MINUTES = int(os.getenv("OTP_SWEEP_INTERVAL_MINUTES", "5"))
        self.OTP_SWEEP_ENABLED = _as_bool(os.getenv("OTP_SWEEP_ENABLED", "true"))


settings = Settings()
