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

"""Parser bridge to the rapper command line tool (Raptor RDF utility).

rapper converts RDF/XML, Turtle, RDFa and friends into N-Triples; the
bridge feeds it bytes on stdin and loads the N-Triples it prints into a
Graph.

Construction checks once that the command runs and is recent enough:

    result = RapperParser.create()
    if result.ok:
        count = result.data.parse(graph, data, "rdfxml", "http://example.org/")

A RapperParser holds no per-call state, so one instance can serve any
number of parse calls, from several threads.
"""

from __future__ import annotations

import re
import shlex
from typing import Sequence

from rdfbridge.config import RapperConfig
from rdfbridge.graph import Graph
from rdfbridge.logger import get_logger
from rdfbridge.ntriples import NTRIPLES, read_ntriples
from rdfbridge.result import ErrorKind, Fail, Ok, Result
from rdfbridge.runner import CommandRunner, SubprocessRunner

log = get_logger(__name__)

VERSION_FLAG = "--version"

SUPPORTED_FORMATS = (
    "rdfxml",
    "ntriples",
    "turtle",
    "trig",
    "nquads",
    "rss-tag-soup",
    "grddl",
    "rdfa",
    "json",
    "guess",
)

_VERSION_RE = re.compile(r"\d+(?:\.\d+)*")


def parse_version(text: str) -> tuple[int, ...] | None:
    """Extract the first dotted number from a version banner."""
    match = _VERSION_RE.search(text)
    if match is None:
        return None
    return tuple(int(part) for part in match.group(0).split("."))


def version_at_least(found: tuple[int, ...], required: tuple[int, ...]) -> bool:
    """Compare dotted versions, treating missing parts as 0 (1.4 == 1.4.0)."""
    width = max(len(found), len(required))
    return found + (0,) * (width - len(found)) >= required + (0,) * (width - len(required))


def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


class RapperParser:
    """Parses RDF into a Graph by piping it through rapper.

    Build instances with RapperParser.create(); the constructor assumes
    the command has already been checked.
    """

    supported_formats = SUPPORTED_FORMATS

    def __init__(
        self,
        argv: Sequence[str],
        version: str,
        runner: CommandRunner,
        timeout: float | None,
    ) -> None:
        self._argv = tuple(argv)
        self._runner = runner
        self._timeout = timeout
        self.version = version

    @property
    def command(self) -> str:
        return shlex.join(self._argv)

    @classmethod
    def create(
        cls,
        config: RapperConfig | None = None,
        runner: CommandRunner | None = None,
    ) -> Result[RapperParser]:
        """Check the configured command and return a ready parser.

        Fails with TOOL_NOT_FOUND if `<command> --version` cannot be run or
        exits nonzero, and with TOOL_VERSION_TOO_OLD if the reported version
        is below config.minimum_version.
        """
        config = config or RapperConfig()
        runner = runner or SubprocessRunner()

        try:
            argv = shlex.split(config.command)
        except ValueError as exc:
            argv = []
            log.warning("Cannot split command %r: %s", config.command, exc)
        if not argv:
            return Fail(
                kind=ErrorKind.TOOL_NOT_FOUND,
                error=f"Failed to execute the command '{config.command}'",
                context={"command": config.command},
            )

        command = shlex.join(argv)
        result = runner.run([*argv, VERSION_FLAG], timeout=config.timeout)
        if not result.ok:
            if result.kind == ErrorKind.TOOL_TIMEOUT:
                return result  # type: ignore[return-value]
            return Fail(
                kind=ErrorKind.TOOL_NOT_FOUND,
                error=f"Failed to execute the command '{command}'",
                context={"command": command, "reason": result.error},
            )

        output = result.data
        if output.returncode != 0:
            return Fail(
                kind=ErrorKind.TOOL_NOT_FOUND,
                error=(
                    f"Failed to execute the command '{command}': "
                    f"{_first_line(output.stderr_text) or f'exit code {output.returncode}'}"
                ),
                context={"command": command},
            )

        banner = _first_line(output.stdout_text)
        found = parse_version(banner)
        required = parse_version(config.minimum_version) or ()
        if found is None or not version_at_least(found, required):
            return Fail(
                kind=ErrorKind.TOOL_VERSION_TOO_OLD,
                error=f"Version {config.minimum_version} or higher of rapper is required.",
                context={
                    "command": command,
                    "required": config.minimum_version,
                    "found": ".".join(map(str, found)) if found else banner,
                },
            )

        version = ".".join(map(str, found))
        log.info("Using %s (version %s)", command, version)
        return Ok(data=cls(argv, version, runner, config.timeout))

    def _check_params(self, graph: object, data: object, fmt: object) -> Fail | None:
        if not isinstance(graph, Graph):
            problem = f"graph should be a Graph, got {type(graph).__name__}"
        elif not isinstance(data, (str, bytes)):
            problem = f"data should be str or bytes, got {type(data).__name__}"
        elif not isinstance(fmt, str) or not fmt:
            problem = f"format should be a non-empty string, got {fmt!r}"
        else:
            return None
        return Fail(
            kind=ErrorKind.INVALID_ARGUMENT,
            error=problem,
            context={"command": self.command},
        )

    def parse(
        self,
        graph: Graph,
        data: str | bytes,
        fmt: str,
        base_uri: str | None,
    ) -> Result[int]:
        """Parse `data` in syntax `fmt` and add its triples to `graph`.

        Returns the number of triples added. The graph is only touched once
        rapper has succeeded and its whole output has been read.
        """
        problem = self._check_params(graph, data, fmt)
        if problem is not None:
            return problem

        # rapper reads stdin and cannot resolve relative IRIs without a base
        if not base_uri:
            return Fail(
                kind=ErrorKind.MISSING_BASE_URI,
                error="rapper command requires base_uri set, when reading from standard input",
                context={"command": self.command, "format": fmt},
            )

        payload = data.encode("utf-8") if isinstance(data, str) else data
        argv = [
            *self._argv,
            "--quiet",
            "--input", fmt,
            "--output", NTRIPLES,
            "-",
            base_uri,
        ]

        result = self._runner.run(argv, stdin=payload, timeout=self._timeout)
        if not result.ok:
            log.warning("rapper failed to run: %s", result.error)
            return result  # type: ignore[return-value]

        output = result.data
        if output.returncode != 0:
            stderr = output.stderr_text
            log.warning("rapper exited %d for format '%s'", output.returncode, fmt)
            return Fail(
                kind=ErrorKind.TOOL_EXECUTION_FAILED,
                error=f"Error while executing command rapper: {_first_line(stderr) or 'no error output'}",
                context={
                    "command": shlex.join(argv),
                    "format": fmt,
                    "returncode": output.returncode,
                    "stderr": stderr,
                },
            )

        try:
            text = output.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            return Fail(
                kind=ErrorKind.TOOL_EXECUTION_FAILED,
                error=f"rapper output is not valid UTF-8: {exc}",
                context={
                    "command": shlex.join(argv),
                    "format": fmt,
                    "returncode": output.returncode,
                    "stderr": output.stderr_text,
                },
            )

        triples = read_ntriples(text)
        if not triples.ok:
            return Fail(
                kind=triples.kind,
                error=triples.error,
                context={
                    **triples.context,
                    "command": shlex.join(argv),
                    "format": fmt,
                    "returncode": output.returncode,
                    "stderr": output.stderr_text,
                },
            )

        added = graph.add_all(triples.data)
        log.info("rapper parsed %s from <%s>: %d triples added", fmt, base_uri, added)
        return Ok(data=added)
