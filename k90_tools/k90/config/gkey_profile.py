#!/usr/bin/env python3
"""
K90 G-key Profile

Builds the GKEYINFO document the G-key profile loader imports, and reads
the macro payload back out of one.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO, Dict, Union

from ..macroscript.macroscript_compiler import CompiledMacro
from ..macroscript.macroscript_encoder import encode_events
from .constants import (
    PROFILE_BUTTON_FUNCTION,
    PROFILE_BUTTON_ID,
    PROFILE_DELAY_TYPE,
    PROFILE_INFO,
    PROFILE_LAUNCH_PATH,
    PROFILE_LOOP_NUMBER,
    PROFILE_LOOP_TYPE,
    PROFILE_RANDOM_DELAY_TIME,
    PROFILE_ROOT,
)


class ProfileError(Exception):
    """Exception raised for unreadable or invalid G-key profiles"""

    pass


def profile_fields(macro: CompiledMacro) -> Dict[str, str]:
    """Return the GKEYINFO field values for a compiled macro, in document order"""
    return {
        "Info": PROFILE_INFO,
        "LoopType": PROFILE_LOOP_TYPE,
        "ButtonFunction": PROFILE_BUTTON_FUNCTION,
        "ButtonID": PROFILE_BUTTON_ID,
        "DefaultDelayTime": str(macro.default_delay),
        "DelayType": PROFILE_DELAY_TYPE,
        "FixMacroDelay": str(macro.default_delay),
        "LaunchPath": PROFILE_LAUNCH_PATH,
        "LoopNumber": PROFILE_LOOP_NUMBER,
        "MacroName": macro.name,
        "RandomDelayTime": PROFILE_RANDOM_DELAY_TIME,
        "MacroInfo": encode_events(macro.events),
    }


def build_profile(fields: Dict[str, str]) -> ET.ElementTree:
    """Build a GKEYINFO document with one element per field"""
    root = ET.Element(PROFILE_ROOT)
    for name, value in fields.items():
        ET.SubElement(root, name).text = value
    tree = ET.ElementTree(root)
    ET.indent(tree, space="")
    return tree


def write_profile(
    macro: CompiledMacro, destination: Union[str, Path, BinaryIO]
) -> None:
    """Write a compiled macro as a G-key profile (UTF-8, one element per line)"""
    tree = build_profile(profile_fields(macro))
    tree.write(
        destination,
        encoding="utf-8",
        xml_declaration=True,
        short_empty_elements=False,
    )


def read_macro_info(source: Union[str, Path]) -> str:
    """
    Read the MacroInfo payload from a G-key profile

    Raises:
        ProfileError: If the file is not valid XML or not a GKEYINFO document
    """
    try:
        root = ET.parse(source).getroot()
    except ET.ParseError as e:
        raise ProfileError(f"{source} is not valid XML: {e}")

    if root.tag != PROFILE_ROOT:
        raise ProfileError(f"{source} is not a G-key profile (root is <{root.tag}>)")

    macro_info = root.find("MacroInfo")
    if macro_info is None:
        raise ProfileError(f"{source} has no MacroInfo element")
    return macro_info.text or ""
