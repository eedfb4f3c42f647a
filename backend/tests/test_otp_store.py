from datetime import datetime, timedelta, timezone

from sharecare.services.otp_store import OTPRecord, OTPStore

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_record(phone="+919876543210", **kwargs):
    return OTPRecord(phone=phone, code="123456", expires_at=NOW + timedelta(minutes=10), **kwargs)


def test_put_get_delete():
    store = OTPStore()
    record = make_record()
    store.put(record)

    assert store.get(record.phone) == record
    assert record.phone in store
    assert len(store) == 1

    assert store.delete(record.phone) is True
    assert store.get(record.phone) is None
    assert store.delete(record.phone) is False


def test_put_replaces_existing_record():
    store = OTPStore()
    store.put(make_record())
    store.put(make_record(attempts=2))

    assert len(store) == 1
    assert store.get("+919876543210").attempts == 2


def test_items_is_a_snapshot():
    store = OTPStore()
    store.put(make_record("+911111111111"))
    store.put(make_record("+912222222222"))

    for phone, _ in store.items():
        store.delete(phone)

    assert len(store) == 0


def test_with_attempt_returns_new_record():
    record = make_record()
    bumped = record.with_attempt()

    assert record.attempts == 0
    assert bumped.attempts == 1
    assert bumped.code == record.code


def test_expiry_boundary():
    record = make_record()

    assert not record.is_expired(NOW)
    assert record.is_expired(record.expires_at)
    assert record.remaining_seconds(NOW) == 600
    assert record.remaining_seconds(NOW + timedelta(seconds=0.5)) == 599
    assert record.remaining_seconds(NOW + timedelta(minutes=11)) == 0


def test_attempts_exhausted():
    assert not make_record(attempts=2).attempts_exhausted
    assert make_record(attempts=3).attempts_exhausted
