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

"""In-memory graph exposed as subject → predicate → ordered values.

Insertion order is kept at every level, so the same sequence of adds always
yields the same index and therefore byte-identical serializer output.
"""

from __future__ import annotations

from typing import Iterable, Iterator

import rdflib

from rdfbridge.terms import (
    Literal,
    Resource,
    Term,
    as_resource,
    term_from_rdflib,
    term_to_rdflib,
)

Triple = tuple[Resource, Resource, Term]


class Graph:
    """A set of triples indexed by subject, then predicate.

    Values for one subject and predicate are dict keys, which keeps their
    insertion order and makes the duplicate check constant time.
    """

    def __init__(self) -> None:
        self._index: dict[str, dict[str, dict[Term, None]]] = {}

    def add(self, subject: Resource | str, predicate: Resource | str, obj: Term | str) -> int:
        """Add one triple. Returns 1 if it was new, 0 if already present.

        A bare string object is taken as a resource, not a literal.
        """
        subj = as_resource(subject)
        pred = as_resource(predicate)
        if pred.is_bnode():
            raise ValueError(f"Predicate must be a URI, got blank node {pred.value}")
        value = obj if isinstance(obj, (Resource, Literal)) else as_resource(obj)

        values = self._index.setdefault(subj.value, {}).setdefault(pred.value, {})
        if value in values:
            return 0
        values[value] = None
        return 1

    def add_all(self, triples: Iterable[Triple]) -> int:
        return sum(self.add(s, p, o) for s, p, o in triples)

    def get(self, subject: Resource | str, predicate: Resource | str) -> list[Term]:
        subj = as_resource(subject).value
        pred = as_resource(predicate).value
        return list(self._index.get(subj, {}).get(pred, {}))

    def triples(self) -> Iterator[Triple]:
        for subject, properties in self._index.items():
            for predicate, values in properties.items():
                for value in values:
                    yield Resource(subject), Resource(predicate), value

    def count_triples(self) -> int:
        return sum(len(values) for props in self._index.values() for values in props.values())

    def __len__(self) -> int:
        return self.count_triples()

    def __contains__(self, triple: Triple) -> bool:
        subject, predicate, obj = triple
        return obj in self._index.get(as_resource(subject).value, {}).get(
            as_resource(predicate).value, {}
        )

    def to_rdf_php(self) -> dict[str, dict[str, list[dict[str, str]]]]:
        """Return a detached copy of the index with values in dict form."""
        return {
            subject: {
                predicate: [value.to_rdf_php() for value in values]
                for predicate, values in properties.items()
            }
            for subject, properties in self._index.items()
        }

    # ── rdflib interop ────────────────────────────────────────

    @classmethod
    def from_rdflib(cls, source: rdflib.Graph) -> Graph:
        """Copy an rdflib graph. Triples are sorted for a stable order."""
        graph = cls()
        for s, p, o in sorted(source, key=lambda t: (t[0].n3(), t[1].n3(), t[2].n3())):
            graph.add(term_from_rdflib(s), term_from_rdflib(p), term_from_rdflib(o))
        return graph

    def to_rdflib(self) -> rdflib.Graph:
        target = rdflib.Graph()
        for s, p, o in self.triples():
            target.add((term_to_rdflib(s), term_to_rdflib(p), term_to_rdflib(o)))
        return target
