"""Tests for IR code format inference and command builders."""

from __future__ import annotations

import json

import pytest

from dock_tools.core.ir_codes import (
    DEFAULT_TORTURE_CODE,
    build_auth_message,
    build_send_command,
    build_stop_command,
    infer_code_format,
)

_GC_CODE = "sendir,1:1,1,38000,1,1,172,172,22,64,22,21,22,1820"
_PRONTO_CODE = "0000 006C 0022 0002 015B 00AD 0016 0016 0016 0041"


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("17;0x2A4C0A8A0282;48;3", "hex"),
        (DEFAULT_TORTURE_CODE, "hex"),
        (_GC_CODE, "gc"),
        (_PRONTO_CODE, "pronto"),
        ("sendir,1:1,1,38000;1", "gc"),
        ("", "pronto"),
        (";", "hex"),
        ("SENDIR,1:1", "pronto"),
        ("x sendir", "pronto"),
    ],
    ids=["hex", "default-torture", "gc", "pronto", "gc-with-semicolon", "empty", "bare-semicolon", "upper", "inner"],
)
def test_infer_code_format(code: str, expected: str) -> None:
    assert infer_code_format(code) == expected


def test_send_command_serializes_wire_format() -> None:
    command = build_send_command("17;0x2A4C0A8A0282;48;3", repeat=3)

    assert json.loads(command.model_dump_json(exclude_none=True)) == {
        "type": "dock",
        "id": 0,
        "command": "ir_send",
        "code": "17;0x2A4C0A8A0282;48;3",
        "format": "hex",
        "repeat": 3,
        "int_side": True,
        "int_top": False,
        "ext1": True,
        "ext2": True,
    }


def test_send_command_without_repeat_omits_field() -> None:
    command = build_send_command(_PRONTO_CODE)

    data = json.loads(command.model_dump_json(exclude_none=True))
    assert "repeat" not in data
    assert data["format"] == "pronto"


def test_stop_command_wire_format() -> None:
    assert json.loads(build_stop_command().model_dump_json()) == {"type": "dock", "id": 0, "command": "ir_stop"}


def test_auth_message_wire_format() -> None:
    assert build_auth_message("0000").model_dump_json() == '{"type":"auth","token":"0000"}'
