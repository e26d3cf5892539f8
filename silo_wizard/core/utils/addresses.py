from __future__ import annotations

import re

from eth_utils import to_checksum_address

from silo_wizard.core.constants.base import ZERO_ADDRESS

_EVM_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")


def looks_like_evm_address(value: str | None) -> bool:
    if value is None:
        return False
    return bool(_EVM_ADDRESS_RE.match(str(value).strip()))


def is_zero_address(value: str | None) -> bool:
    return bool(value) and str(value).strip().lower() == ZERO_ADDRESS


def normalize_address(value: str | None) -> str | None:
    """Checksummed address, or None when the input is not a 20-byte hex address."""
    if not looks_like_evm_address(value):
        return None
    return to_checksum_address(str(value).strip().lower())


def is_valid_address_format(value: str | None) -> bool:
    return normalize_address(value) is not None


def addresses_equal(a: str | None, b: str | None) -> bool:
    if not a or not b:
        return False
    return str(a).strip().lower() == str(b).strip().lower()


def to_address(value: str | bytes | None) -> str | None:
    """Checksummed address from a hex string or raw 20/32-byte value.

    32-byte values (indexed topics) keep their last 20 bytes.
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
        if len(raw) == 32:
            raw = raw[-20:]
        if len(raw) != 20:
            return None
        return to_checksum_address(raw)
    text = str(value).strip()
    if len(text) == 66 and text.startswith("0x"):
        text = "0x" + text[-40:]
    if not looks_like_evm_address(text):
        return None
    return to_checksum_address(text)
