from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from sharecare.core.dependencies import get_otp_service, get_sms_service
from sharecare.main import app
from sharecare.services.otp_service import OTPService
from sharecare.services.otp_store import OTPStore
from sharecare.services.sms_service import SMSService

SENDER = "+14155238886"
PHONE = "+919876543210"


class ManualClock:
    def __init__(self, start=None):
        self.current = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def now(self):
        return self.current

    def advance(self, **kwargs):
        self.current += timedelta(**kwargs)


class SequenceRandom:
    """Stands in for random.Random, handing out codes in order."""

    def __init__(self, *values):
        self.values = list(values)

    def randint(self, a, b):
        value = self.values.pop(0)
        assert a <= value <= b
        return value


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def store():
    return OTPStore()


@pytest.fixture
def otp_service(store, clock):
    return OTPService(store=store, clock=clock)


@pytest.fixture
def twilio_client():
    client = MagicMock()
    client.messages.create.return_value = MagicMock(sid="SM123")
    return client


@pytest.fixture
def sms_service(twilio_client):
    return SMSService("", "", SENDER, app_name="ShareCare", client=twilio_client)


@pytest.fixture
def client(otp_service, sms_service):
    app.dependency_overrides[get_otp_service] = lambda: otp_service
    app.dependency_overrides[get_sms_service] = lambda: sms_service
    yield TestClient(app)
    app.dependency_overrides.clear()
