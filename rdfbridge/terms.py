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

"""RDF value objects — resources (URIs and blank nodes) and literals.

Values also have a plain dict form, {"type", "value"[, "lang" | "datatype"]},
which is what the graph index exposes and what the serializer consumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rdflib import BNode as RdflibBNode
from rdflib import Literal as RdflibLiteral
from rdflib import URIRef
from rdflib.term import Identifier

URI = "uri"
BNODE = "bnode"
LITERAL = "literal"

BNODE_PREFIX = "_:"


@dataclass(frozen=True, slots=True)
class Resource:
    """A URI reference, or a blank node when the value starts with '_:'."""
    value: str

    @property
    def kind(self) -> str:
        return BNODE if self.value.startswith(BNODE_PREFIX) else URI

    def is_bnode(self) -> bool:
        return self.kind == BNODE

    def to_rdf_php(self) -> dict[str, str]:
        return {"type": self.kind, "value": self.value}

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Literal:
    """A lexical value with at most one of a language tag or a datatype."""
    value: str
    lang: str | None = None
    datatype: str | None = None

    kind = LITERAL

    def __post_init__(self) -> None:
        if self.lang and self.datatype:
            raise ValueError(
                f"Literal {self.value!r} cannot have both a language tag "
                f"({self.lang}) and a datatype ({self.datatype})"
            )

    def to_rdf_php(self) -> dict[str, str]:
        value = {"type": LITERAL, "value": self.value}
        if self.lang:
            value["lang"] = self.lang
        elif self.datatype:
            value["datatype"] = self.datatype
        return value

    def __str__(self) -> str:
        return self.value


Term = Resource | Literal


def as_resource(value: Resource | str) -> Resource:
    """Accept a Resource or a bare URI / '_:' label string.

    Anything else, literals included, raises ValueError.
    """
    if isinstance(value, Resource):
        return value
    if isinstance(value, str):
        return Resource(str(value))
    raise ValueError(f"Expected a resource or URI string, got {type(value).__name__}: {value!r}")


def term_from_rdf_php(value: dict[str, Any]) -> Term:
    """Build a term from its dict form. Unknown types raise ValueError."""
    kind = value.get("type")
    if kind in (URI, BNODE):
        return Resource(value["value"])
    if kind == LITERAL:
        return Literal(value["value"], lang=value.get("lang"), datatype=value.get("datatype"))
    raise ValueError(f"Unknown RDF value type: {kind!r}")


# ── rdflib interop ────────────────────────────────────────────

def term_from_rdflib(node: Identifier) -> Term:
    """Convert an rdflib URIRef, BNode or Literal into a term."""
    if isinstance(node, RdflibBNode):
        return Resource(BNODE_PREFIX + str(node))
    if isinstance(node, URIRef):
        return Resource(str(node))
    if isinstance(node, RdflibLiteral):
        if node.language:
            return Literal(str(node), lang=node.language)
        datatype = str(node.datatype) if node.datatype is not None else None
        return Literal(str(node), datatype=datatype)
    raise ValueError(f"Cannot convert rdflib node of type {type(node).__name__}")


def term_to_rdflib(term: Term) -> Identifier:
    """Convert a term into the matching rdflib node."""
    if isinstance(term, Literal):
        if term.lang:
            return RdflibLiteral(term.value, lang=term.lang)
        if term.datatype:
            return RdflibLiteral(term.value, datatype=URIRef(term.datatype))
        return RdflibLiteral(term.value)
    if term.is_bnode():
        return RdflibBNode(term.value[len(BNODE_PREFIX):])
    return URIRef(term.value)
