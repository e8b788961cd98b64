import re

from eth_utils import remove_0x_prefix

from depositor.common.exceptions import MalformedHexError

HEX_DIGITS_PATTERN = re.compile(r'[0-9a-fA-F]*')


def to_hex(value: bytes) -> str:
    """Lowercase hex string without 0x prefix."""
    return bytes(value).hex()


def from_hex(value: str) -> bytes:
    """
    Decodes hex string with optional 0x prefix.
    Odd length strings are padded with a leading zero nibble.
    """
    if not isinstance(value, str):
        raise MalformedHexError(repr(value))

    hex_digits = remove_0x_prefix(value)  # type: ignore[arg-type]
    if not HEX_DIGITS_PATTERN.fullmatch(hex_digits):
        raise MalformedHexError(value)

    if len(hex_digits) % 2:
        hex_digits = '0' + hex_digits
    return bytes.fromhex(hex_digits)
