"""In-process one-time passcode issuer."""

from __future__ import annotations

import asyncio
import secrets
from datetime import datetime, timezone
from typing import Dict, Optional

from src.domain.entities.otp import OneTimeCode
from src.domain.ports.otp import IOtpGenerator
from src.shared import get_logger

logger = get_logger(__name__)


class OtpService(IOtpGenerator):
    """Issue random numeric codes and keep the latest one per identity.

    Codes live in process memory only; each worker process has its own
    store.
    """

    def __init__(self, length: int = 6, ttl_seconds: int = 300) -> None:
        self._length = length
        self._ttl_seconds = ttl_seconds
        self._codes: Dict[str, OneTimeCode] = {}
        self._lock = asyncio.Lock()

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    async def create_otp(self, identity: str, now: Optional[datetime] = None) -> str:
        key = self._key(identity)
        code = "".join(secrets.choice("0123456789") for _ in range(self._length))
        current = now or datetime.now(timezone.utc)

        async with self._lock:
            self._purge_expired(current)
            self._codes[key] = OneTimeCode(
                identity=key,
                code=code,
                ttl_seconds=self._ttl_seconds,
                issued_at=current,
            )

        logger.info("otp.issued", identity=key, ttl_seconds=self._ttl_seconds)
        return code

    async def verify_otp(
        self, identity: str, code: str, now: Optional[datetime] = None
    ) -> bool:
        key = self._key(identity)
        current = now or datetime.now(timezone.utc)

        async with self._lock:
            issued = self._codes.get(key)
            if issued is None:
                logger.info("otp.verify.unknown_identity", identity=key)
                return False
            if issued.is_expired(current):
                del self._codes[key]
                logger.info("otp.verify.expired", identity=key)
                return False
            if not secrets.compare_digest(issued.code, code):
                logger.info("otp.verify.mismatch", identity=key)
                return False
            del self._codes[key]

        logger.info("otp.verify.success", identity=key)
        return True

    def _purge_expired(self, now: datetime) -> None:
        expired = [
            key for key, issued in self._codes.items() if issued.is_expired(now)
        ]
        for key in expired:
            del self._codes[key]
        if expired:
            logger.debug("otp.store.purged", count=len(expired))

    @staticmethod
    def _key(identity: str) -> str:
        return identity.strip().lower()
