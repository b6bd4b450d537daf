"""Tests for the IR torture client."""

from __future__ import annotations

import asyncio
import logging

import pytest

from dock_tools.core.ir_codes import DEFAULT_TORTURE_CODE
from dock_tools.core.ir_torture import TortureConfig, run_torture
from tests.conftest import FakeDockConnection


@pytest.mark.asyncio
async def test_torture_sends_until_transport_error(caplog: pytest.LogCaptureFixture) -> None:
    connection = FakeDockConnection(fail_after=6)

    with caplog.at_level(logging.INFO, logger="dock_tools.core"):
        count = await asyncio.wait_for(run_torture(connection, TortureConfig(interval_ms=1)), timeout=5)

    assert count == 5
    messages = connection.messages()
    assert messages[0] == {"type": "auth", "token": "0000"}
    assert [m["id"] for m in messages[1:]] == [1, 2, 3, 4, 5]
    assert all(m["code"] == DEFAULT_TORTURE_CODE and "repeat" not in m for m in messages[1:])
    assert connection.closed
    assert "Closed. Number of sent messages: 5" in caplog.text


@pytest.mark.asyncio
async def test_torture_infers_format_of_custom_code() -> None:
    connection = FakeDockConnection(fail_after=2)
    code = "0000 006C 0022 0002 015B 00AD"

    count = await asyncio.wait_for(run_torture(connection, TortureConfig(code=code, interval_ms=1)), timeout=5)

    assert count == 1
    assert connection.messages()[1]["format"] == "pronto"


@pytest.mark.asyncio
async def test_torture_stops_when_dock_hangs_up(connection: FakeDockConnection) -> None:
    async def _hang_up_soon() -> None:
        await asyncio.sleep(0.05)
        connection.hang_up()

    hang_up = asyncio.create_task(_hang_up_soon())
    count = await asyncio.wait_for(run_torture(connection, TortureConfig(interval_ms=5)), timeout=5)
    await hang_up

    assert count == len(connection.sent) - 1
    assert count >= 1
