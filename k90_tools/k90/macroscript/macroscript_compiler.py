#!/usr/bin/env python3
"""
K90 MacroScript Compiler

Compiles line-oriented MacroScript source into the timed key events of a
G-key macro.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Union

from ..config.constants import (
    DEFAULT_DELAY_MS,
    DEFAULT_MACRO_NAME,
    MAX_DEFAULT_DELAY_MS,
    MAX_DURATION_MS,
    MIN_DEFAULT_DELAY_MS,
)
from .keys import Keys, resolve_key

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _check_duration(milliseconds: int) -> None:
    if not 0 <= milliseconds <= MAX_DURATION_MS:
        raise ValueError(f"duration must be between 0 and {MAX_DURATION_MS}")


def _check_key(key: int) -> None:
    if not 0 <= key <= 0xFF:
        raise ValueError("key code must be between 0 and 255")


@dataclass(frozen=True)
class Delay:
    """Pause for a number of milliseconds"""

    milliseconds: int

    def __post_init__(self) -> None:
        _check_duration(self.milliseconds)

    def hex_code(self) -> str:
        return f"ff{self.milliseconds:04x}"


@dataclass(frozen=True)
class KeyDown:
    """Start holding a key"""

    key: Keys

    def __post_init__(self) -> None:
        _check_key(self.key)

    def hex_code(self) -> str:
        return f"{int(self.key):02x}0001"


@dataclass(frozen=True)
class KeyUp:
    """Release a key"""

    key: Keys

    def __post_init__(self) -> None:
        _check_key(self.key)

    def hex_code(self) -> str:
        return f"{int(self.key):02x}0000"


@dataclass(frozen=True)
class KeyTap:
    """Press a key, hold it, then release it (keydown + delay + keyup)"""

    key: Keys
    hold_milliseconds: int

    def __post_init__(self) -> None:
        _check_key(self.key)
        _check_duration(self.hold_milliseconds)

    def hex_code(self) -> str:
        return (
            KeyDown(self.key).hex_code()
            + Delay(self.hold_milliseconds).hex_code()
            + KeyUp(self.key).hex_code()
        )


MacroEvent = Union[Delay, KeyDown, KeyUp, KeyTap]


class DelayState(Enum):
    """Whether the next key event must be preceded by an implicit delay"""

    SATISFIED = "satisfied"
    OWED = "owed"


@dataclass
class CompiledMacro:
    """A compiled macro: its name, default delay and event sequence"""

    name: str = DEFAULT_MACRO_NAME
    default_delay: int = DEFAULT_DELAY_MS
    events: List[MacroEvent] = field(default_factory=list)


def _parse_int(text: str) -> Optional[int]:
    """Parse a signed decimal integer, or return None"""
    if _INTEGER.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        # Past the interpreter's digit limit
        return None


def _parse_duration(text: str) -> Optional[int]:
    """Parse a millisecond count that fits an opcode's 16-bit field"""
    value = _parse_int(text)
    if value is None or value < 0 or value > MAX_DURATION_MS:
        return None
    return value


class Compiler:
    """MacroScript compiler"""

    def compile(self, source: Union[str, Iterable[str]]) -> CompiledMacro:
        """
        Compile MacroScript source to a CompiledMacro

        Args:
            source: Whole script text, or an iterable of lines (a file
                object works; line endings are ignored)

        Returns:
            The compiled macro. Malformed lines are skipped with a warning,
            so this never fails on script content.
        """
        if isinstance(source, str):
            source = source.splitlines()

        macro = CompiledMacro()
        delay_state = DelayState.SATISFIED
        for line_number, line in enumerate(source, 1):
            delay_state = self._compile_line(
                macro, line.rstrip("\r\n"), line_number, delay_state
            )
        return macro

    def _compile_line(
        self, macro: CompiledMacro, line: str, line_number: int, state: DelayState
    ) -> DelayState:
        """Compile one line, returning the delay state for the next line"""
        parts = line.split()
        if not parts:
            return state

        command = parts[0]

        if command == "delay":
            return self._compile_delay(macro, parts)
        elif command in ("defaultdelay", "default_delay"):
            self._compile_default_delay(macro, parts, line, line_number)
            return state
        elif command == "nodelay":
            return DelayState.SATISFIED
        elif command == "name":
            self._compile_name(macro, line)
            return state
        elif command in ("press", "keypress"):
            return self._compile_press(macro, parts, line, line_number, state)
        elif command in ("down", "keydown"):
            return self._compile_key_event(
                macro, KeyDown, parts, line, line_number, state
            )
        elif command in ("up", "keyup"):
            return self._compile_key_event(
                macro, KeyUp, parts, line, line_number, state
            )
        else:
            return self._compile_bare_key(macro, command, state)

    def _compile_delay(self, macro: CompiledMacro, parts: List[str]) -> DelayState:
        """Compile delay command"""
        ms = _parse_duration(parts[1]) if len(parts) == 2 else None
        if ms is None:
            ms = macro.default_delay
        macro.events.append(Delay(ms))
        return DelayState.SATISFIED

    def _compile_default_delay(
        self, macro: CompiledMacro, parts: List[str], line: str, line_number: int
    ) -> None:
        """Compile defaultdelay command"""
        ms = _parse_int(parts[1]) if len(parts) == 2 else None
        if ms is None or ms < MIN_DEFAULT_DELAY_MS or ms > MAX_DEFAULT_DELAY_MS:
            _report_malformed(line, line_number)
            return
        macro.default_delay = ms

    def _compile_name(self, macro: CompiledMacro, line: str) -> None:
        """Compile name command; the rest of the line is the name verbatim"""
        parts = line.split(None, 1)
        macro.name = parts[1] if len(parts) > 1 else DEFAULT_MACRO_NAME

    def _compile_press(
        self,
        macro: CompiledMacro,
        parts: List[str],
        line: str,
        line_number: int,
        state: DelayState,
    ) -> DelayState:
        """Compile press command (keydown + hold delay + keyup)"""
        if len(parts) not in (2, 3):
            _report_malformed(line, line_number)
            return state

        key = resolve_key(parts[1])
        if key is Keys.NONE:
            return state

        ms = _parse_duration(parts[2]) if len(parts) == 3 else None
        if ms is None:
            ms = macro.default_delay

        return _emit(macro, KeyTap(key, ms), state)

    def _compile_key_event(
        self,
        macro: CompiledMacro,
        event_type: type,
        parts: List[str],
        line: str,
        line_number: int,
        state: DelayState,
    ) -> DelayState:
        """Compile keydown/keyup commands"""
        if len(parts) != 2:
            _report_malformed(line, line_number)
            return state

        key = resolve_key(parts[1])
        if key is Keys.NONE:
            return state

        return _emit(macro, event_type(key), state)

    def _compile_bare_key(
        self, macro: CompiledMacro, token: str, state: DelayState
    ) -> DelayState:
        """Compile a line that starts with a key name (a press at the default delay)"""
        key = resolve_key(token)
        if key is Keys.NONE:
            return state
        return _emit(macro, KeyTap(key, macro.default_delay), state)


def _emit(macro: CompiledMacro, event: MacroEvent, state: DelayState) -> DelayState:
    """Append a key event, paying any owed implicit delay first"""
    if state is DelayState.OWED:
        macro.events.append(Delay(macro.default_delay))
    macro.events.append(event)
    return DelayState.OWED


def _report_malformed(line: str, line_number: int) -> None:
    logger.warning("line %d: ignoring malformed line '%s'", line_number, line)


def compile_script(source: Union[str, Iterable[str]]) -> CompiledMacro:
    """Compile MacroScript source with a fresh Compiler"""
    return Compiler().compile(source)
