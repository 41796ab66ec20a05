#!/usr/bin/env python3
"""
Tests for G-key profile fields and documents
"""

import io
from pathlib import Path

import pytest

from ..macroscript.keys import Keys
from ..macroscript.macroscript_compiler import CompiledMacro, KeyTap, compile_script
from .constants import MACRO_MAX_CHARS
from .gkey_profile import (
    ProfileError,
    build_profile,
    profile_fields,
    read_macro_info,
    write_profile,
)


def test_profile_fields() -> None:
    macro = compile_script(["name Copy Paste", "defaultdelay 20", "a"])

    fields = profile_fields(macro)

    assert list(fields) == [
        "Info",
        "LoopType",
        "ButtonFunction",
        "ButtonID",
        "DefaultDelayTime",
        "DelayType",
        "FixMacroDelay",
        "LaunchPath",
        "LoopNumber",
        "MacroName",
        "RandomDelayTime",
        "MacroInfo",
    ]
    assert fields["Info"] == "LaverGKey"
    assert fields["LoopType"] == "0"
    assert fields["ButtonFunction"] == "48"
    assert fields["ButtonID"] == "1"
    assert fields["DefaultDelayTime"] == "20"
    assert fields["DelayType"] == "2"
    assert fields["FixMacroDelay"] == "20"
    assert fields["LaunchPath"] == ""
    assert fields["LoopNumber"] == "1"
    assert fields["MacroName"] == "Copy Paste"
    assert fields["RandomDelayTime"] == "1000"
    assert fields["MacroInfo"].startswith("410001ff0014410000000000")
    assert len(fields["MacroInfo"]) == MACRO_MAX_CHARS


def test_build_profile() -> None:
    root = build_profile({"Info": "LaverGKey", "LaunchPath": ""}).getroot()

    assert root.tag == "GKEYINFO"
    assert [(child.tag, child.text) for child in root] == [
        ("Info", "LaverGKey"),
        ("LaunchPath", ""),
    ]


def test_write_profile_layout() -> None:
    buffer = io.BytesIO()

    write_profile(CompiledMacro(name="Fish & Chips"), buffer)

    lines = buffer.getvalue().decode("utf-8").splitlines()
    assert lines[0] == "<?xml version='1.0' encoding='utf-8'?>"
    assert lines[1] == "<GKEYINFO>"
    assert lines[2] == "<Info>LaverGKey</Info>"
    assert "<LaunchPath></LaunchPath>" in lines
    assert "<MacroName>Fish &amp; Chips</MacroName>" in lines
    assert lines[-1] == "</GKEYINFO>"


def test_write_and_read_back(tmp_path: Path) -> None:
    path = tmp_path / "macro.xml"
    macro = CompiledMacro(events=[KeyTap(Keys.Q, 15)])

    write_profile(macro, path)

    assert read_macro_info(path) == profile_fields(macro)["MacroInfo"]


def test_read_rejects_invalid_xml(tmp_path: Path) -> None:
    path = tmp_path / "broken.xml"
    path.write_text("<GKEYINFO><MacroInfo>", encoding="utf-8")

    with pytest.raises(ProfileError, match="not valid XML"):
        read_macro_info(path)


def test_read_rejects_other_documents(tmp_path: Path) -> None:
    path = tmp_path / "other.xml"
    path.write_text("<settings><MacroInfo>ff0001</MacroInfo></settings>", encoding="utf-8")

    with pytest.raises(ProfileError, match="not a G-key profile"):
        read_macro_info(path)


def test_read_requires_macro_info(tmp_path: Path) -> None:
    path = tmp_path / "empty.xml"
    path.write_text("<GKEYINFO><Info>LaverGKey</Info></GKEYINFO>", encoding="utf-8")

    with pytest.raises(ProfileError, match="no MacroInfo"):
        read_macro_info(path)
