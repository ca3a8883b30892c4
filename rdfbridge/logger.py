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

"""Structured logger with per-file counters and final summary.

Collects parsed/failed counts per input file so the command line tool
can print a CI-friendly summary at the end.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class FileCounter:
    """Outcome of parsing one input file."""

    name: str
    triples: int = 0
    failed: bool = False
    error: str = ""


@dataclass
class ConversionSummary:
    """Accumulates counters across all input files of one run."""

    files: dict[str, FileCounter] = field(default_factory=dict)

    def counter(self, name: str) -> FileCounter:
        """Get or create a counter for a named input."""
        if name not in self.files:
            self.files[name] = FileCounter(name=name)
        return self.files[name]

    @property
    def total_triples(self) -> int:
        return sum(f.triples for f in self.files.values())

    @property
    def failed(self) -> int:
        return sum(1 for f in self.files.values() if f.failed)

    def report(self) -> str:
        """Format a human-readable summary block."""
        lines: list[str] = ["", "Conversion Summary", "=" * 40]
        for entry in self.files.values():
            if entry.failed:
                lines.append(f"{entry.name}: FAILED  {entry.error}")
            else:
                lines.append(f"{entry.name}: {entry.triples} triples")
        lines.append("-" * 40)
        lines.append(
            f"{len(self.files)} files, {self.failed} failed, "
            f"{self.total_triples} triples"
        )
        lines.append("=" * 40)
        return "\n".join(lines)
