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

"""rdfbridge — convert RDF files to N-Triples through rapper.

Every input is parsed into one graph, which is then written as N-Triples.

Usage:
    rdfbridge foaf.rdf
    rdfbridge --input-format turtle --base-uri http://example.org/ data.ttl
    rdfbridge --config bridge.yaml --output all.nt a.rdf b.rdf
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rdfbridge.config import load_config
from rdfbridge.graph import Graph
from rdfbridge.logger import ConversionSummary, get_logger
from rdfbridge.ntriples import NTRIPLES, serialize
from rdfbridge.rapper import SUPPORTED_FORMATS, RapperParser

log = get_logger("rdfbridge")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rdfbridge",
        description="Parse RDF files with rapper and write them as N-Triples",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="RDF files to convert",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to bridge YAML (default: built-in settings)",
    )
    parser.add_argument(
        "--input-format",
        default="guess",
        help=f"rapper input syntax, one of {', '.join(SUPPORTED_FORMATS)} (default: guess)",
    )
    parser.add_argument(
        "--base-uri",
        default=None,
        help="Base URI for relative references (default: each file's file:// URI)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write N-Triples here instead of stdout",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    cfg_result = load_config(args.config.resolve() if args.config else None)
    if not cfg_result.ok:
        log.error(cfg_result.error)
        return 1

    bridge_result = RapperParser.create(cfg_result.data.rapper)
    if not bridge_result.ok:
        log.error(bridge_result.error)
        return 1
    bridge = bridge_result.data

    graph = Graph()
    summary = ConversionSummary()

    for path in args.inputs:
        counter = summary.counter(str(path))
        try:
            data = path.read_bytes()
        except OSError as exc:
            counter.failed = True
            counter.error = f"cannot read: {exc.strerror or exc}"
            log.error("Cannot read %s: %s", path, exc)
            continue

        base_uri = args.base_uri or path.resolve().as_uri()
        result = bridge.parse(graph, data, args.input_format, base_uri)
        if not result.ok:
            counter.failed = True
            counter.error = str(result)
            log.error("Parsing %s failed: %s", path, result.error)
            continue
        counter.triples = result.data

    log.info(summary.report())
    if summary.failed:
        return 1

    nt_result = serialize(graph, NTRIPLES)
    if not nt_result.ok:
        log.error("Serialization failed: %s", nt_result.error)
        return 1

    if args.output:
        args.output.write_text(nt_result.data, encoding="utf-8", newline="\n")
        log.info("Wrote %d triples to %s", graph.count_triples(), args.output)
    else:
        sys.stdout.write(nt_result.data)

    return 0


if __name__ == "__main__":
    sys.exit(main())
