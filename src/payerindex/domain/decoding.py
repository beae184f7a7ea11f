"""Decoding of Payer contract logs into typed events.

Two input shapes are understood:

- raw EVM logs as returned by ``eth_getLogs`` (``topics``, ``data``,
  ``transactionHash``, ``logIndex``, ``blockNumber``) plus the
  ``blockTimestamp`` of the containing block;
- already decoded JSON records carrying an ``event`` name and the event's
  parameters next to the same ambient fields.
"""

from typing import Any, Mapping, Optional, Sequence

from eth_abi import decode
from eth_abi.exceptions import DecodingError
from eth_utils import decode_hex, encode_hex, keccak

from payerindex.domain.errors import ValidationError, unknown_event_type
from payerindex.domain.events import (
    EVENT_TYPES,
    MAX_BLOCK_TIMESTAMP,
    EventMetadata,
    PaidBackDebt,
    PayerEvent,
    RegisteredDebt,
)
from payerindex.utils.address import normalize_address, normalize_transaction_hash

REGISTERED_DEBT_SIGNATURE = "RegisteredDebt(address,uint256)"
PAID_BACK_DEBT_SIGNATURE = "PaidBackDebt(address,uint256,uint256)"

REGISTERED_DEBT_TOPIC = keccak(text=REGISTERED_DEBT_SIGNATURE)
PAID_BACK_DEBT_TOPIC = keccak(text=PAID_BACK_DEBT_SIGNATURE)


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    try:
        return decode_hex(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid hex value '{value}'") from e


def _to_int(value: Any, name: str) -> int:
    """Read an integer that may arrive as int, decimal string or 0x hex string."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid integer for '{name}': {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if text.lower().startswith("0x"):
                return int(text, 16)
            return int(text)
        except ValueError as e:
            raise ValidationError(f"Invalid integer for '{name}': {value!r}") from e
    raise ValidationError(f"Invalid integer for '{name}': {value!r}")


def _require(source: Mapping[str, Any], key: str) -> Any:
    value = source.get(key)
    if value is None:
        raise ValidationError(f"Missing field '{key}'")
    return value


def _unsigned(value: Any, name: str) -> int:
    amount = _to_int(value, name)
    if amount < 0:
        raise ValidationError(f"Field '{name}' must not be negative, got {amount}")
    return amount


def decode_metadata(
    source: Mapping[str, Any], block_timestamp: Optional[int] = None
) -> EventMetadata:
    """Read transaction hash, log index and block data from a log or record.

    Args:
        source: Log or record mapping
        block_timestamp: Timestamp to use when the source carries none

    Raises:
        ValidationError: If a required field is missing or malformed
    """
    timestamp = source.get("blockTimestamp")
    if timestamp is None:
        if block_timestamp is None:
            raise ValidationError("Missing field 'blockTimestamp'")
        timestamp = block_timestamp

    timestamp = _to_int(timestamp, "blockTimestamp")
    if not 0 <= timestamp <= MAX_BLOCK_TIMESTAMP:
        raise ValidationError(f"Field 'blockTimestamp' out of range, got {timestamp}")

    block_number = source.get("blockNumber")
    return EventMetadata(
        transaction_hash=normalize_transaction_hash(_require(source, "transactionHash")),
        log_index=_to_int(_require(source, "logIndex"), "logIndex"),
        block_timestamp=timestamp,
        block_number=None if block_number is None else _to_int(block_number, "blockNumber"),
    )


def _split_account(
    topics: Sequence[bytes], data: bytes, value_types: list[str]
) -> tuple[str, tuple]:
    """Return the account and the remaining ABI values of a log.

    ``account`` is read from the first indexed topic when present, otherwise
    it is the first word of ``data``.
    """
    try:
        if len(topics) >= 2:
            return normalize_address(topics[1][-20:]), decode(value_types, data)
        values = decode(["address", *value_types], data)
    except DecodingError as e:
        raise ValidationError(f"Could not decode log data: {e}") from e
    return normalize_address(values[0]), tuple(values[1:])


def decode_log(log: Mapping[str, Any], block_timestamp: Optional[int] = None) -> PayerEvent:
    """Decode a raw EVM log emitted by the Payer contract.

    Args:
        log: Log mapping with ``topics``, ``data`` and transaction fields
        block_timestamp: Timestamp of the containing block, if the log does
            not carry ``blockTimestamp`` itself

    Returns:
        RegisteredDebt or PaidBackDebt event

    Raises:
        ValidationError: If the log is not a known Payer event or is malformed
    """
    topics = [_to_bytes(topic) for topic in log.get("topics") or []]
    if not topics:
        raise ValidationError("Log has no topics")
    data = _to_bytes(log.get("data") or b"")
    metadata = decode_metadata(log, block_timestamp)

    if topics[0] == REGISTERED_DEBT_TOPIC:
        account, (amount,) = _split_account(topics, data, ["uint256"])
        return RegisteredDebt(account=account, amount=amount, metadata=metadata)

    if topics[0] == PAID_BACK_DEBT_TOPIC:
        account, (amount, remaining_debt) = _split_account(topics, data, ["uint256", "uint256"])
        return PaidBackDebt(
            account=account,
            amount=amount,
            remaining_debt=remaining_debt,
            metadata=metadata,
        )

    raise ValidationError(unknown_event_type(encode_hex(topics[0])))


def decode_record(record: Mapping[str, Any]) -> PayerEvent:
    """Decode a JSON event record.

    Expected keys: ``event``, ``account``, ``amount``, ``remainingDebt``
    (PaidBackDebt only, optional), ``transactionHash``, ``logIndex``,
    ``blockTimestamp`` and optionally ``blockNumber``.

    Raises:
        ValidationError: If the record is not a known Payer event or is malformed
    """
    event_type = _require(record, "event")
    if not isinstance(event_type, str) or event_type not in EVENT_TYPES:
        raise ValidationError(unknown_event_type(str(event_type)))

    account = normalize_address(_require(record, "account"))
    amount = _unsigned(_require(record, "amount"), "amount")
    metadata = decode_metadata(record)

    if event_type == RegisteredDebt.event_type:
        return RegisteredDebt(account=account, amount=amount, metadata=metadata)

    return PaidBackDebt(
        account=account,
        amount=amount,
        remaining_debt=_unsigned(record.get("remainingDebt", 0), "remainingDebt"),
        metadata=metadata,
    )


def is_raw_log(entry: Mapping[str, Any]) -> bool:
    """Return True if the mapping looks like a raw log rather than a record."""
    return "topics" in entry


def emitted_by(log: Mapping[str, Any], contract_address: str) -> bool:
    """Return True if a raw log was emitted by ``contract_address``."""
    emitter = log.get("address")
    if emitter is None:
        return False
    return normalize_address(emitter) == normalize_address(contract_address)
