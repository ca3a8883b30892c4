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

"""N-Triples serializer and reader.

Serializer: walks the graph index subject → predicate → values and emits
one `subject <predicate> object .` line per triple, in index order.
Errors are returned as Fail values; no partial output is ever returned.

Reader: parses N-Triples text (e.g. rapper's output) into terms with
rdflib's W3C N-Triples parser.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Mapping

from rdflib import Literal as RdflibLiteral
from rdflib import URIRef
from rdflib.exceptions import ParserError
from rdflib.plugins.parsers.ntriples import W3CNTriplesParser, r_literal, unquote, uriquote

from rdfbridge.escaping import escape_iri, escape_literal
from rdfbridge.graph import Graph, Triple
from rdfbridge.logger import get_logger
from rdfbridge.result import ErrorKind, Fail, Ok, Result
from rdfbridge.terms import BNODE, BNODE_PREFIX, LITERAL, URI, Literal, Resource, term_from_rdflib

log = get_logger(__name__)

NTRIPLES = "ntriples"

FORMAT_ALIASES: Mapping[str, str] = {
    "nt": NTRIPLES,
    "n-triples": NTRIPLES,
    "application/n-triples": NTRIPLES,
    "text/plain": NTRIPLES,
}


def resolve_format(fmt: Any) -> Result[str]:
    """Map a format name or alias to its canonical name."""
    if not isinstance(fmt, str) or not fmt:
        return Fail(
            kind=ErrorKind.INVALID_ARGUMENT,
            error=f"Format must be a non-empty string, got {fmt!r}",
            context={"format": fmt},
        )
    return Ok(data=FORMAT_ALIASES.get(fmt, fmt))


# ── Values ────────────────────────────────────────────────────

def serialize_resource(value: str) -> str:
    """Blank nodes are written bare, URIs inside angle brackets."""
    escaped = escape_iri(value)
    if value.startswith(BNODE_PREFIX):
        return escaped
    return f"<{escaped}>"


def serialize_value(value: Resource | Literal | Mapping[str, Any]) -> Result[str]:
    """Serialize one RDF value, given as a term or in dict form.

    Literals get `@lang` or `^^<datatype>`, never both; a language tag
    is written verbatim.
    """
    if isinstance(value, (Resource, Literal)):
        value = value.to_rdf_php()

    kind = value.get("type")
    if kind in (URI, BNODE):
        return Ok(data=serialize_resource(value["value"]))

    if kind == LITERAL:
        quoted = f'"{escape_literal(value["value"])}"'
        if value.get("lang"):
            return Ok(data=f"{quoted}@{value['lang']}")
        if value.get("datatype"):
            return Ok(data=f"{quoted}^^<{escape_iri(value['datatype'])}>")
        return Ok(data=quoted)

    return Fail(
        kind=ErrorKind.UNSUPPORTED_VALUE_KIND,
        error=f"Unable to serialise object of type '{kind}' to ntriples",
        context={"kind": kind},
    )


# ── Graph ─────────────────────────────────────────────────────

class NTriplesSerializer:
    """Serializes a Graph to N-Triples text."""

    format_name = NTRIPLES

    def serialize(
        self,
        graph: Graph,
        fmt: str,
        options: Mapping[str, Any] | None = None,
    ) -> Result[str]:
        """Return the whole graph as N-Triples, or a Fail with no output.

        `options` is accepted for interface compatibility; N-Triples has none.
        """
        fmt_result = resolve_format(fmt)
        if not fmt_result.ok:
            return fmt_result
        if fmt_result.data != self.format_name:
            return Fail(
                kind=ErrorKind.UNSUPPORTED_FORMAT,
                error=f"{type(self).__name__} does not support: {fmt}",
                context={"format": fmt, "supported": [self.format_name]},
            )

        lines: list[str] = []
        for subject, properties in graph.to_rdf_php().items():
            subj = serialize_resource(subject)
            for predicate, values in properties.items():
                pred = f"<{escape_iri(predicate)}>"
                for value in values:
                    obj = serialize_value(value)
                    if not obj.ok:
                        log.error("Serialization aborted at <%s>: %s", subject, obj.error)
                        return obj
                    lines.append(f"{subj} {pred} {obj.data} .\n")

        log.debug("Serialized %d triples as %s", len(lines), self.format_name)
        return Ok(data="".join(lines))


SERIALIZERS: Mapping[str, NTriplesSerializer] = {
    NTRIPLES: NTriplesSerializer(),
}


def serialize(
    graph: Graph,
    fmt: str,
    options: Mapping[str, Any] | None = None,
) -> Result[str]:
    """Serialize `graph` with the serializer registered for `fmt`."""
    fmt_result = resolve_format(fmt)
    if not fmt_result.ok:
        return fmt_result

    serializer = SERIALIZERS.get(fmt_result.data)
    if serializer is None:
        return Fail(
            kind=ErrorKind.UNSUPPORTED_FORMAT,
            error=f"No serializer available for format: {fmt}",
            context={"format": fmt, "supported": sorted(SERIALIZERS)},
        )
    return serializer.serialize(graph, fmt_result.data, options)


# ── Reader ────────────────────────────────────────────────────

class _LexicalNTriplesParser(W3CNTriplesParser):
    """W3C N-Triples parser that keeps literal lexical forms as written.

    rdflib canonicalizes typed literals by default ("01"^^xsd:integer
    becomes "1"); the text read here must round-trip unchanged.
    """

    def literal(self):
        if not self.peek('"'):
            return False
        lexical, lang, datatype = self.eat(r_literal).groups()
        if lang and datatype:
            raise ParserError("Can't have both a language and a datatype")
        if datatype:
            datatype = URIRef(uriquote(unquote(datatype)))
        return RdflibLiteral(
            unquote(lexical),
            lang=lang or None,
            datatype=datatype or None,
            normalize=False,
        )


class _TripleCollector:
    """rdflib parser sink that buffers triples as terms."""

    def __init__(self) -> None:
        self.triples: list[Triple] = []

    def triple(self, s, p, o) -> None:
        self.triples.append((term_from_rdflib(s), term_from_rdflib(p), term_from_rdflib(o)))


def read_ntriples(text: str) -> Result[list[Triple]]:
    """Parse N-Triples text into a list of triples.

    Literal lexical forms are kept exactly as written. Blank node labels
    are replaced by fresh, session-scoped labels.
    """
    collector = _TripleCollector()
    parser = _LexicalNTriplesParser(sink=collector)
    try:
        parser.parse(StringIO(text), bnode_context={})
    except ParserError as exc:
        return Fail(
            kind=ErrorKind.TOOL_EXECUTION_FAILED,
            error=f"Invalid N-Triples output: {exc}",
            context={"stderr": "", "output": text[:500]},
        )
    return Ok(data=collector.triples)
