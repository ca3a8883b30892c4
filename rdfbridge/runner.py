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

"""Command runner — spawn a process, feed stdin, collect stdout/stderr.

The Protocol lets the parser bridge run against a substitute runner in tests.
SubprocessRunner is the real implementation on top of subprocess.run, which
closes the pipes and reaps the child on every path, timeouts included.
"""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from typing import Protocol, Sequence

from rdfbridge.logger import get_logger
from rdfbridge.result import ErrorKind, Fail, Ok, Result

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CommandOutput:
    """Exit status and captured streams of a finished process."""

    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


class CommandRunner(Protocol):
    def run(
        self,
        argv: Sequence[str],
        stdin: bytes | None = None,
        timeout: float | None = None,
    ) -> Result[CommandOutput]:
        ...


class SubprocessRunner:
    """Runs commands as local subprocesses without a shell."""

    def run(
        self,
        argv: Sequence[str],
        stdin: bytes | None = None,
        timeout: float | None = None,
    ) -> Result[CommandOutput]:
        command = shlex.join(argv)
        log.debug("Running: %s", command)

        if stdin is None:
            io_args = {"stdin": subprocess.DEVNULL}
        else:
            io_args = {"input": stdin}

        try:
            proc = subprocess.run(
                list(argv),
                capture_output=True,
                timeout=timeout,
                check=False,
                **io_args,
            )
        except OSError as exc:
            return Fail(
                kind=ErrorKind.TOOL_NOT_FOUND,
                error=f"Failed to execute the command '{command}': {exc.strerror or exc}",
                context={"command": command},
            )
        except subprocess.TimeoutExpired as exc:
            stderr = exc.stderr or b""
            return Fail(
                kind=ErrorKind.TOOL_TIMEOUT,
                error=f"Command '{command}' timed out after {timeout}s",
                context={
                    "command": command,
                    "timeout": timeout,
                    "stderr": stderr.decode("utf-8", errors="replace"),
                },
            )

        return Ok(data=CommandOutput(
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        ))
