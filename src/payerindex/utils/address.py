"""Address and transaction hash normalisation.

Entities are keyed by canonical lowercase ``0x`` hex strings, so every value
coming from a log, a JSON record or the command line goes through here first.
"""

from typing import Union

from eth_utils import decode_hex, encode_hex, is_hexstr, to_normalized_address

from payerindex.domain.errors import (
    ValidationError,
    invalid_address,
    invalid_transaction_hash,
)

HexValue = Union[str, bytes, bytearray]


def normalize_address(value: HexValue) -> str:
    """Return the canonical lowercase form of a 20-byte address.

    Accepts a hex string (any case, with or without checksum) or raw bytes.

    Raises:
        ValidationError: If the value is not a 20-byte address
    """
    try:
        return to_normalized_address(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(invalid_address(str(value))) from e


def normalize_transaction_hash(value: HexValue) -> str:
    """Return the canonical lowercase ``0x`` form of a 32-byte hash.

    Raises:
        ValidationError: If the value is not a 32-byte hash
    """
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        if not is_hexstr(value):
            raise ValidationError(invalid_transaction_hash(str(value)))
        try:
            raw = decode_hex(value)
        except ValueError as e:
            raise ValidationError(invalid_transaction_hash(value)) from e

    if len(raw) != 32:
        raise ValidationError(invalid_transaction_hash(str(value)))
    return encode_hex(raw)
