import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class OTPRecord:
    """A pending one-time code for a single phone number."""

    phone: str
    code: str
    expires_at: datetime
    attempts: int = 0
    max_attempts: int = 3

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def remaining_seconds(self, now: datetime) -> int:
        return max(0, math.floor((self.expires_at - now).total_seconds()))

    @property
    def attempts_exhausted(self) -> bool:
        return self.attempts >= self.max_attempts

    def with_attempt(self) -> "OTPRecord":
        return replace(self, attempts=self.attempts + 1)


class OTPStore:
    """
    In-memory mapping of phone number -> OTPRecord.
    Process-local, can be swapped for a shared cache (Redis) later.
    Not thread-safe on its own; OTPService serialises access.
    """

    def __init__(self):
        self._records: Dict[str, OTPRecord] = {}

    def get(self, phone: str) -> Optional[OTPRecord]:
        return self._records.get(phone)

    def put(self, record: OTPRecord) -> None:
        self._records[record.phone] = record

    def delete(self, phone: str) -> bool:
        return self._records.pop(phone, None) is not None

    def items(self) -> List[Tuple[str, OTPRecord]]:
        # Snapshot so callers can delete while iterating
        return list(self._records.items())

    def __contains__(self, phone: str) -> bool:
        return phone in self._records

    def __len__(self) -> int:
        return len(self._records)
