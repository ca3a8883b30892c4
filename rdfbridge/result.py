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

"""Result pattern for error handling without exceptions.

Provides Ok[T] and Fail types as an alternative to raising exceptions.
Every function that can fail returns Result[T] = Ok[T] | Fail, and every
Fail carries an ErrorKind so callers can tell failure modes apart.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Distinguishable failure modes of the serializer and parser bridge."""

    UNSUPPORTED_FORMAT = "UnsupportedFormat"
    UNSUPPORTED_VALUE_KIND = "UnsupportedValueKind"
    TOOL_NOT_FOUND = "ToolNotFound"
    TOOL_VERSION_TOO_OLD = "ToolVersionTooOld"
    MISSING_BASE_URI = "MissingBaseUri"
    TOOL_EXECUTION_FAILED = "ToolExecutionFailed"
    TOOL_TIMEOUT = "ToolTimeout"
    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_CONFIG = "InvalidConfig"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying its kind, a message and diagnostic context."""

    kind: ErrorKind
    error: str
    context: Any = None
    ok: bool = field(default=False, init=False)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.error}"


Result = Ok[T] | Fail
