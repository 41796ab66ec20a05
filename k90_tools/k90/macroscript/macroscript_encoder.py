#!/usr/bin/env python3
"""
K90 MacroScript Encoder

Serializes compiled macro events into the fixed-size MacroInfo hex payload.
"""

import logging
from typing import Iterable

from ..config.constants import MACRO_MAX_CHARS, PAD_UNIT
from .macroscript_compiler import MacroEvent

logger = logging.getLogger(__name__)


def encode_event(event: MacroEvent) -> str:
    """Encode a single event as lowercase hex opcodes"""
    return event.hex_code()


def encode_events(events: Iterable[MacroEvent]) -> str:
    """
    Encode an event sequence as a MacroInfo payload

    Short payloads are padded with empty opcodes up to MACRO_MAX_CHARS.
    Oversized payloads are returned whole, with a warning.
    """
    payload = "".join(encode_event(event) for event in events)

    if len(payload) > MACRO_MAX_CHARS:
        logger.warning(
            "macro maximum size exceeded (%d of %d hex digits)",
            len(payload),
            MACRO_MAX_CHARS,
        )
        return payload

    missing_units = -(-(MACRO_MAX_CHARS - len(payload)) // len(PAD_UNIT))
    return payload + PAD_UNIT * missing_units
