"""Replay of JSON-lines event feeds."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from payerindex.database.base import Database
from payerindex.domain.decoding import decode_log, decode_record, emitted_by, is_raw_log
from payerindex.domain.errors import DomainError
from payerindex.domain.payer import PayerEventHandler
from payerindex.utils.address import normalize_address

logger = logging.getLogger(__name__)


class ReplayService:
    """Service for feeding recorded events through the Payer handlers."""

    def __init__(self, db: Database):
        """Initialize replay service.

        Args:
            db: Database instance
        """
        self.db = db
        self.handler = PayerEventHandler(db)

    def replay_file(self, path: str, payer_address: Optional[str] = None) -> dict[str, Any]:
        """Apply every event in a JSON-lines file, in file order.

        Each non-blank line holds either a raw log or a decoded event record
        (see ``payerindex.domain.decoding``).

        Args:
            path: Path to the JSON-lines file
            payer_address: If given, raw logs emitted by other contracts are skipped

        Returns:
            Dict with replay statistics:
            - applied: number of events that produced a DebtChange
            - dropped: number of repayments dropped for lack of a Debt
            - skipped: number of raw logs from other contracts
            - errors: list of error messages for lines that could not be applied

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If payer_address is not a valid address
        """
        feed_path = Path(path)
        if not feed_path.exists():
            raise FileNotFoundError(f"Event file not found: {path}")
        if payer_address is not None:
            payer_address = normalize_address(payer_address)

        applied = 0
        dropped = 0
        skipped = 0
        errors = []

        with open(feed_path, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                if not line.strip():
                    continue

                try:
                    entry = json.loads(line)
                except json.JSONDecodeError as e:
                    errors.append(f"Line {line_num}: invalid JSON: {e.msg}")
                    continue
                if not isinstance(entry, dict):
                    errors.append(f"Line {line_num}: expected a JSON object")
                    continue

                try:
                    if is_raw_log(entry):
                        if payer_address is not None and not emitted_by(entry, payer_address):
                            skipped += 1
                            continue
                        event = decode_log(entry)
                    else:
                        event = decode_record(entry)

                    if self.handler.handle(event) is None:
                        dropped += 1
                    else:
                        applied += 1
                except DomainError as e:
                    errors.append(f"Line {line_num}: {e}")
                    continue

        logger.info(
            "Replayed %s: %d applied, %d dropped, %d skipped, %d errors",
            feed_path.name,
            applied,
            dropped,
            skipped,
            len(errors),
        )
        return {
            "applied": applied,
            "dropped": dropped,
            "skipped": skipped,
            "errors": errors,
        }
