"""
K90 MacroScript Compiler, Encoder and Disassembler

This module provides compilation of MacroScript source into G-key macro
events, encoding of those events as a MacroInfo payload, and disassembly of
payloads back to text.
"""

from .keys import Keys, resolve_key
from .macroscript_compiler import (
    CompiledMacro,
    Compiler,
    Delay,
    KeyDown,
    KeyTap,
    KeyUp,
    compile_script,
)
from .macroscript_disassembler import disassemble
from .macroscript_encoder import encode_events

__all__ = [
    "CompiledMacro",
    "Compiler",
    "Delay",
    "KeyDown",
    "KeyTap",
    "KeyUp",
    "Keys",
    "compile_script",
    "disassemble",
    "encode_events",
    "resolve_key",
]
