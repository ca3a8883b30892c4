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

"""Loads the bridge YAML configuration into typed dataclasses.

Pure loader — no process handling. YAML structure IS the config contract.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from rdfbridge.result import ErrorKind, Fail, Ok, Result

DEFAULT_COMMAND = "rapper"
MINIMUM_RAPPER_VERSION = "1.4.17"
DEFAULT_TIMEOUT = 30

COMMAND_ENV_VAR = "RDFBRIDGE_RAPPER"

_VERSION_RE = re.compile(r"\d+(?:\.\d+)*")


# ── Rapper ─────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class RapperConfig:
    """How to find and drive the rapper executable."""
    command: str = DEFAULT_COMMAND
    minimum_version: str = MINIMUM_RAPPER_VERSION
    timeout: float = DEFAULT_TIMEOUT


# ── Top-level ──────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class BridgeConfig:
    rapper: RapperConfig = field(default_factory=RapperConfig)


# ── Loader ─────────────────────────────────────────────────────

def _invalid(message: str, path: Path | None) -> Fail:
    return Fail(
        kind=ErrorKind.INVALID_CONFIG,
        error=message,
        context={"path": str(path) if path else None},
    )


def _build_rapper(raw: dict[str, Any]) -> RapperConfig:
    return RapperConfig(
        command=str(raw.get("command", DEFAULT_COMMAND)),
        minimum_version=str(raw.get("minimum_version", MINIMUM_RAPPER_VERSION)),
        timeout=raw.get("timeout", DEFAULT_TIMEOUT),
    )


def _check(config: BridgeConfig, path: Path | None) -> Result[BridgeConfig]:
    rapper = config.rapper
    if not rapper.command.strip():
        return _invalid("rapper.command must not be empty", path)
    timeout = rapper.timeout
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        return _invalid(f"rapper.timeout must be a positive number, got {timeout!r}", path)
    if not _VERSION_RE.fullmatch(rapper.minimum_version):
        return _invalid(
            f"rapper.minimum_version is not a dotted version: {rapper.minimum_version!r}",
            path,
        )
    return Ok(data=config)


def _apply_env(config: BridgeConfig) -> BridgeConfig:
    override = os.environ.get(COMMAND_ENV_VAR)
    if not override:
        return config
    rapper = config.rapper
    return BridgeConfig(
        rapper=RapperConfig(
            command=override,
            minimum_version=rapper.minimum_version,
            timeout=rapper.timeout,
        )
    )


def load_config(path: Path | None = None) -> Result[BridgeConfig]:
    """Load bridge YAML into BridgeConfig. Without a path, use defaults.

    The RDFBRIDGE_RAPPER environment variable overrides rapper.command.
    """
    if path is None:
        return _check(_apply_env(BridgeConfig()), None)

    if not path.exists():
        return _invalid(f"Config file not found: {path}", path)

    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        return _invalid(f"YAML parse error: {exc}", path)

    try:
        config = BridgeConfig(rapper=_build_rapper(raw.get("rapper") or {}))
    except (AttributeError, TypeError) as exc:
        return _invalid(f"Config structure error: {exc}", path)

    return _check(_apply_env(config), path)
