"""
Parent PIN handling.

Only a hash of the PIN is stored, under AppData.config["parentPin"], so it
travels with backups. Hashes written by the old browser app without
WebCrypto ("legacy_" + a 32-bit djb2 value) still verify.
"""

from __future__ import annotations

import hashlib
import hmac
import logging

from quest.constants import MIN_PIN_LENGTH, PIN_CONFIG_KEY
from quest.models import AppData

logger = logging.getLogger(__name__)

LEGACY_PREFIX = "legacy_"


class PinError(ValueError):
    """PIN too short or not made of digits."""


def hash_pin(pin: str) -> str:
    return hashlib.sha256(pin.encode("utf-8")).hexdigest()


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def legacy_hash_pin(pin: str) -> str:
    """djb2 with JavaScript 32-bit overflow, as stored by the old app."""
    h = 5381
    for char in pin:
        h = _to_int32(h << 5) + h + ord(char)
    return LEGACY_PREFIX + str(h)


def has_pin(data: AppData) -> bool:
    return bool(data.config.get(PIN_CONFIG_KEY))


def verify_pin(data: AppData, pin: str) -> bool:
    stored = data.config.get(PIN_CONFIG_KEY)
    if not stored or not pin:
        return False
    candidate = legacy_hash_pin(pin) if stored.startswith(LEGACY_PREFIX) else hash_pin(pin)
    return hmac.compare_digest(candidate, stored)


def set_pin(data: AppData, pin: str) -> None:
    """
    Store a new parent PIN (replacing any previous one).

    Raises:
        PinError: if the PIN is shorter than MIN_PIN_LENGTH or not all digits
    """
    pin = pin.strip()
    if len(pin) < MIN_PIN_LENGTH or not pin.isdigit():
        raise PinError(f"PIN must be {MIN_PIN_LENGTH}+ digits")
    data.config[PIN_CONFIG_KEY] = hash_pin(pin)
    logger.info("Parent PIN updated")
