import enum
import hmac
import logging
import random
import threading
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Optional

from sharecare.core.clock import Clock, system_clock
from sharecare.services.otp_store import OTPRecord, OTPStore

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(minutes=10)
DEFAULT_MAX_ATTEMPTS = 3

MSG_NOT_FOUND = "OTP not found or expired"
MSG_EXPIRED = "OTP has expired"
MSG_ATTEMPTS_EXCEEDED = "Maximum attempts exceeded. Please request a new OTP."
MSG_SUCCESS = "OTP verified successfully"


class VerifyStatus(str, enum.Enum):
    not_found = "not_found"
    expired = "expired"
    attempts_exceeded = "attempts_exceeded"
    success = "success"
    mismatch = "mismatch"


@dataclass(frozen=True)
class VerifyResult:
    status: VerifyStatus
    message: str
    remaining_attempts: Optional[int] = None
    can_request_new_otp: bool = False

    @property
    def success(self) -> bool:
        return self.status is VerifyStatus.success


class OTPService:
    """
    Issues and verifies one-time codes for phone verification.

    All reads of the current time go through ``clock`` and every operation
    runs under a single lock, so concurrent requests for the same phone
    resolve to exactly one outcome.
    """

    def __init__(
        self,
        store: Optional[OTPStore] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        ttl: timedelta = DEFAULT_TTL,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        self._store = store if store is not None else OTPStore()
        self._clock = clock or system_clock
        self._rng = rng or random.SystemRandom()
        self.ttl = ttl
        self.max_attempts = max_attempts
        self._lock = threading.Lock()

    def generate_code(self) -> str:
        """Generate a 6-digit OTP in [100000, 999999]."""
        return f"{self._rng.randint(100000, 999999):06d}"

    def issue(self, phone: str) -> str:
        """Replace any pending OTP for phone with a fresh one and return the code."""
        code = self.generate_code()
        with self._lock:
            if self._store.delete(phone):
                logger.info("Cleared existing OTP for %s before storing new one", phone)

            expires_at = self._clock.now() + self.ttl
            self._store.put(OTPRecord(
                phone=phone,
                code=code,
                expires_at=expires_at,
                attempts=0,
                max_attempts=self.max_attempts,
            ))

        logger.info("OTP stored for %s, expires at %s", phone, expires_at.isoformat())
        return code

    def verify(self, phone: str, submitted_code: str) -> VerifyResult:
        """Check a submitted code. Failures are returned, never raised."""
        with self._lock:
            record = self._store.get(phone)
            if record is None:
                logger.info("No OTP found for %s", phone)
                return VerifyResult(VerifyStatus.not_found, MSG_NOT_FOUND)

            if record.is_expired(self._clock.now()):
                self._store.delete(phone)
                logger.info("OTP expired for %s", phone)
                return VerifyResult(VerifyStatus.expired, MSG_EXPIRED)

            if record.attempts_exhausted:
                self._store.delete(phone)
                logger.info("Maximum attempts exceeded for %s - clearing OTP", phone)
                return VerifyResult(
                    VerifyStatus.attempts_exceeded,
                    MSG_ATTEMPTS_EXCEEDED,
                    remaining_attempts=0,
                    can_request_new_otp=True,
                )

            if hmac.compare_digest(submitted_code.encode("utf-8"), record.code.encode("utf-8")):
                self._store.delete(phone)
                logger.info("OTP verified successfully for %s", phone)
                return VerifyResult(VerifyStatus.success, MSG_SUCCESS)

            record = record.with_attempt()
            remaining = record.max_attempts - record.attempts
            logger.info("Invalid OTP for %s, %d attempts remaining", phone, remaining)

            if remaining <= 0:
                self._store.delete(phone)
                logger.info("Maximum attempts reached for %s - clearing OTP", phone)
                return VerifyResult(
                    VerifyStatus.attempts_exceeded,
                    MSG_ATTEMPTS_EXCEEDED,
                    remaining_attempts=0,
                    can_request_new_otp=True,
                )

            self._store.put(record)
            return VerifyResult(
                VerifyStatus.mismatch,
                f"Invalid OTP. {remaining} attempts remaining.",
                remaining_attempts=remaining,
            )

    def remaining_seconds(self, phone: str) -> int:
        """Seconds until the pending OTP for phone expires (0 if none)."""
        with self._lock:
            record = self._store.get(phone)
            if record is None:
                return 0
            now = self._clock.now()
            if record.is_expired(now):
                self._store.delete(phone)
                return 0
            return record.remaining_seconds(now)

    def clear(self, phone: str) -> None:
        with self._lock:
            if self._store.delete(phone):
                logger.info("OTP cleared for %s", phone)

    def sweep_expired(self) -> int:
        """Remove expired OTPs from storage. Returns how many were removed."""
        removed = 0
        with self._lock:
            now = self._clock.now()
            for phone, record in self._store.items():
                if record.is_expired(now):
                    self._store.delete(phone)
                    removed += 1
                    logger.info("Cleaned up expired OTP for %s", phone)
        return removed

    def snapshot(self, phone: str) -> Optional[Dict[str, Any]]:
        """Debug view of the pending OTP for phone, for development only."""
        with self._lock:
            record = self._store.get(phone)
            if record is None:
                return None
            now = self._clock.now()
            return {
                "otp": record.code,
                "expires": record.expires_at.isoformat(),
                "attempts": record.attempts,
                "remainingTime": record.remaining_seconds(now),
            }
