"""Format validators for on-chain identifiers.

Both validators return the value unchanged when it is well formed and raise
ValidationError otherwise.
"""

import re

from .exceptions import ValidationError

HASH_PATTERN = re.compile(r"^0x[0-9a-fA-F]{64}$")
ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def parse_hash(value: object, field: str = "hash") -> str:
    """Validate a 32-byte hex hash such as an interchain token id."""
    if not isinstance(value, str):
        raise ValidationError(field, value, "expected a string")
    if not HASH_PATTERN.match(value):
        raise ValidationError(field, value, "expected 0x followed by 64 hex characters")
    return value


def parse_address(value: object, field: str = "address") -> str:
    """Validate a 20-byte hex EVM address."""
    if not isinstance(value, str):
        raise ValidationError(field, value, "expected a string")
    if not ADDRESS_PATTERN.match(value):
        raise ValidationError(field, value, "expected 0x followed by 40 hex characters")
    return value
