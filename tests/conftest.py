# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Shared test helpers: a scripted CommandRunner that never spawns processes."""

from __future__ import annotations

from typing import Sequence

import pytest

from rdfbridge.result import Fail, Ok, Result
from rdfbridge.runner import CommandOutput


class FakeRunner:
    """Answers `--version` with a banner and every other call with a canned result."""

    def __init__(
        self,
        version: str = "rapper 2.0.15",
        stdout: bytes | str = b"",
        stderr: bytes | str = b"",
        returncode: int = 0,
        version_returncode: int = 0,
        fail: Fail | None = None,
        version_fail: Fail | None = None,
    ) -> None:
        self.version = version
        self.stdout = stdout.encode("utf-8") if isinstance(stdout, str) else stdout
        self.stderr = stderr.encode("utf-8") if isinstance(stderr, str) else stderr
        self.returncode = returncode
        self.version_returncode = version_returncode
        self.fail = fail
        self.version_fail = version_fail
        self.calls: list[tuple[list[str], bytes | None, float | None]] = []

    @property
    def parse_calls(self) -> list[tuple[list[str], bytes | None, float | None]]:
        return [call for call in self.calls if "--version" not in call[0]]

    def run(
        self,
        argv: Sequence[str],
        stdin: bytes | None = None,
        timeout: float | None = None,
    ) -> Result[CommandOutput]:
        self.calls.append((list(argv), stdin, timeout))
        if argv[-1] == "--version":
            if self.version_fail is not None:
                return self.version_fail
            return Ok(data=CommandOutput(
                returncode=self.version_returncode,
                stdout=f"{self.version}\n".encode("utf-8"),
                stderr=b"",
            ))
        if self.fail is not None:
            return self.fail
        return Ok(data=CommandOutput(
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        ))


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture(autouse=True)
def _no_command_override(monkeypatch):
    monkeypatch.delenv("RDFBRIDGE_RAPPER", raising=False)
