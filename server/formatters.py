"""JSON formatting utilities for decoded NMEA records."""

import dataclasses
import json

from navstream.gnss import GNSSSnapshot
from navstream.nmea.types import SentenceRecord, SentenceType

__all__ = [
    "format_headers_message",
    "format_record_message",
    "format_snapshot_messages",
    "record_to_dict",
]


def record_to_dict(sentence_type: SentenceType, record: SentenceRecord) -> dict:
    """Flatten a record into a JSON-ready dict.

    The message ``type`` is the lower-case sentence code ("rmc"); the
    record's own header literal moves to ``header``.
    """
    fields = dataclasses.asdict(record)
    header = fields.pop("type")
    return {"type": sentence_type.value.lower(), "header": header, **fields}


def format_record_message(sentence_type: SentenceType, record: SentenceRecord) -> str:
    """Serialize one record into a JSON string for WebSocket transmission."""
    return json.dumps(record_to_dict(sentence_type, record))


def format_snapshot_messages(snapshot: GNSSSnapshot) -> list[str]:
    """Serialize the records freshly decoded in ``snapshot``, one message each."""
    return [
        format_record_message(
            SentenceType(code), getattr(snapshot, code.lower())
        )
        for code in snapshot.updated
    ]


def format_headers_message(headers: list[str]) -> str:
    """Serialize the discovered sentence headers."""
    return json.dumps({"type": "headers", "headers": headers})
