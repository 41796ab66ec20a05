#!/usr/bin/env python3
"""
Tests for the MacroInfo encoder
"""

import logging

import pytest

from ..config.constants import MACRO_MAX_CHARS, PAD_UNIT
from .keys import Keys
from .macroscript_compiler import Delay, KeyDown, KeyTap, KeyUp, compile_script
from .macroscript_encoder import encode_event, encode_events


def test_empty_payload_is_all_padding() -> None:
    payload = encode_events([])

    assert len(payload) == MACRO_MAX_CHARS == 8160
    assert payload == PAD_UNIT * 1360


def test_key_tap_payload() -> None:
    payload = encode_events([KeyTap(Keys.A, 15)])

    assert payload.startswith("410001ff000f410000")
    assert len(payload) == MACRO_MAX_CHARS
    assert payload[18:] == PAD_UNIT * 1357


def test_event_encodings() -> None:
    assert encode_event(Delay(0xABCD)) == "ffabcd"
    assert encode_event(KeyDown(Keys.OemPeriod)) == "be0001"
    assert encode_event(KeyUp(Keys.D0)) == "300000"
    assert encode_event(KeyTap(Keys.Space, 300)) == "200001ff012c200000"


def test_events_are_concatenated_in_order() -> None:
    payload = encode_events([KeyDown(Keys.A), Delay(15), KeyUp(Keys.A)])

    assert payload.startswith("410001" "ff000f" "410000" "000000")


def test_full_payload_is_not_padded(caplog: pytest.LogCaptureFixture) -> None:
    events = [Delay(1)] * 1360

    with caplog.at_level(logging.WARNING):
        payload = encode_events(events)

    assert payload == "ff0001" * 1360
    assert caplog.records == []


def test_oversized_payload_is_kept_whole(caplog: pytest.LogCaptureFixture) -> None:
    events = [KeyTap(Keys.B, 10)] * 500

    with caplog.at_level(logging.WARNING):
        payload = encode_events(events)

    assert len(payload) == 500 * 18
    assert not payload.endswith(PAD_UNIT)
    assert "macro maximum size exceeded" in caplog.text


def test_encoding_is_deterministic() -> None:
    macro = compile_script(["name Twice", "down shift", "a", "up shift"])

    assert encode_events(macro.events) == encode_events(macro.events)
