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

"""Tests for the N-Triples value serializer, graph serializer and reader."""

import pytest

from rdfbridge.graph import Graph
from rdfbridge.ntriples import (
    NTriplesSerializer,
    read_ntriples,
    resolve_format,
    serialize,
    serialize_resource,
    serialize_value,
)
from rdfbridge.result import ErrorKind
from rdfbridge.terms import Literal, Resource

S = "http://example.org/s"
P = "http://example.org/p"
T = "http://example.org/t"


def _single(obj) -> str:
    graph = Graph()
    graph.add(S, P, obj)
    result = serialize(graph, "ntriples")
    assert result.ok
    return result.data


# ── Values ────────────────────────────────────────────────────

class TestSerializeResource:
    def test_uri_is_bracketed(self):
        assert serialize_resource(S) == "<http://example.org/s>"

    def test_bnode_is_bare(self):
        assert serialize_resource("_:b1") == "_:b1"

    def test_uri_is_iri_escaped(self):
        assert serialize_resource("http://example.org/a b") == "<http://example.org/a\\u0020b>"


class TestSerializeValue:
    def test_uri_dict(self):
        assert serialize_value({"type": "uri", "value": S}).data == f"<{S}>"

    def test_bnode_dict(self):
        assert serialize_value({"type": "bnode", "value": "_:x"}).data == "_:x"

    def test_plain_literal(self):
        assert serialize_value(Literal("a\"b")).data == '"a\\"b"'

    def test_language_literal(self):
        assert serialize_value(Literal("chat", lang="fr")).data == '"chat"@fr'

    def test_language_tag_is_verbatim(self):
        assert serialize_value({"type": "literal", "value": "x", "lang": "en-GB"}).data == '"x"@en-GB'

    def test_datatype_literal(self):
        assert serialize_value(Literal("1", datatype=T)).data == f'"1"^^<{T}>'

    def test_datatype_is_iri_escaped(self):
        result = serialize_value(Literal("1", datatype="http://example.org/a>b"))
        assert result.data == '"1"^^<http://example.org/a\\u003Eb>'

    def test_language_wins_over_datatype_in_dict_form(self):
        value = {"type": "literal", "value": "v", "lang": "en", "datatype": T}
        assert serialize_value(value).data == '"v"@en'

    def test_unknown_kind_fails(self):
        result = serialize_value({"type": "triple", "value": "x"})
        assert not result.ok
        assert result.kind == ErrorKind.UNSUPPORTED_VALUE_KIND
        assert result.context == {"kind": "triple"}
        assert "triple" in result.error


# ── Graph ─────────────────────────────────────────────────────

class TestSerializeGraph:
    def test_empty_graph_is_empty_output(self):
        result = serialize(Graph(), "ntriples")
        assert result.ok
        assert result.data == ""

    def test_plain_literal_line(self):
        assert _single(Literal('a"b')) == '<http://example.org/s> <http://example.org/p> "a\\"b" .\n'

    def test_language_literal_line(self):
        assert _single(Literal("value", lang="en")) == f'<{S}> <{P}> "value"@en .\n'

    def test_datatype_literal_line(self):
        assert _single(Literal("value", datatype=T)) == f'<{S}> <{P}> "value"^^<{T}> .\n'

    def test_uri_object_line(self):
        assert _single(Resource("http://example.org/o")) == f"<{S}> <{P}> <http://example.org/o> .\n"

    def test_bnode_subject_has_no_brackets(self):
        graph = Graph()
        graph.add("_:genid1", P, Literal("x"))
        assert serialize(graph, "ntriples").data == f'_:genid1 <{P}> "x" .\n'

    def test_bnode_object_has_no_brackets(self):
        assert _single(Resource("_:b2")) == f"<{S}> <{P}> _:b2 .\n"

    def test_predicate_is_iri_escaped(self):
        graph = Graph()
        graph.add(S, "http://example.org/p q", Literal("x"))
        assert serialize(graph, "ntriples").data == f'<{S}> <http://example.org/p\\u0020q> "x" .\n'

    def test_multiline_literal_stays_on_one_line(self):
        out = _single(Literal("line1\r\nline2"))
        assert out == f'<{S}> <{P}> "line1\\r\\nline2" .\n'
        assert out.count("\n") == 1

    def test_order_follows_the_graph_index(self):
        graph = Graph()
        graph.add("http://example.org/b", P, Literal("1"))
        graph.add("http://example.org/a", P, Literal("2"))
        graph.add("http://example.org/b", "http://example.org/q", Literal("3"))
        graph.add("http://example.org/b", P, Literal("4"))

        assert serialize(graph, "ntriples").data == (
            f'<http://example.org/b> <{P}> "1" .\n'
            f'<http://example.org/b> <{P}> "4" .\n'
            f'<http://example.org/b> <http://example.org/q> "3" .\n'
            f'<http://example.org/a> <{P}> "2" .\n'
        )

    def test_output_is_deterministic(self):
        graph = Graph()
        graph.add(S, P, Literal("x", lang="en"))
        graph.add("_:b", P, Resource(S))
        graph.add(S, P, Literal("y", datatype=T))
        first = serialize(graph, "ntriples").data
        second = serialize(graph, "ntriples").data
        assert first == second

    def test_aliases(self):
        graph = Graph()
        graph.add(S, P, Literal("x"))
        expected = serialize(graph, "ntriples").data
        for alias in ("nt", "n-triples", "application/n-triples", "text/plain"):
            assert serialize(graph, alias).data == expected

    def test_unsupported_format(self):
        graph = Graph()
        graph.add(S, P, Literal("x"))
        result = serialize(graph, "turtle")
        assert not result.ok
        assert result.kind == ErrorKind.UNSUPPORTED_FORMAT
        assert result.context["format"] == "turtle"

    def test_serializer_rejects_other_formats(self):
        result = NTriplesSerializer().serialize(Graph(), "rdfxml")
        assert result.kind == ErrorKind.UNSUPPORTED_FORMAT
        assert "does not support: rdfxml" in result.error

    @pytest.mark.parametrize("fmt", ["", None, 42])
    def test_invalid_format_argument(self, fmt):
        result = serialize(Graph(), fmt)
        assert result.kind == ErrorKind.INVALID_ARGUMENT

    def test_bad_value_aborts_without_output(self):
        class _BrokenGraph(Graph):
            def to_rdf_php(self):
                return {S: {P: [
                    {"type": "literal", "value": "fine"},
                    {"type": "mystery", "value": "?"},
                ]}}

        result = serialize(_BrokenGraph(), "ntriples")
        assert not result.ok
        assert result.kind == ErrorKind.UNSUPPORTED_VALUE_KIND
        assert result.context["kind"] == "mystery"
        assert not hasattr(result, "data")


class TestResolveFormat:
    def test_unknown_names_pass_through(self):
        assert resolve_format("turtle").data == "turtle"

    def test_alias(self):
        assert resolve_format("nt").data == "ntriples"


# ── Reader ────────────────────────────────────────────────────

class TestReadNtriples:
    def test_reads_triples(self):
        text = (
            f'<{S}> <{P}> "hello"@en .\n'
            f'<{S}> <{P}> "5"^^<http://www.w3.org/2001/XMLSchema#integer> .\n'
            f"<{S}> <{P}> <http://example.org/o> .\n"
        )
        result = read_ntriples(text)
        assert result.ok
        assert result.data == [
            (Resource(S), Resource(P), Literal("hello", lang="en")),
            (Resource(S), Resource(P), Literal("5", datatype="http://www.w3.org/2001/XMLSchema#integer")),
            (Resource(S), Resource(P), Resource("http://example.org/o")),
        ]

    def test_unescapes_literals(self):
        result = read_ntriples(f'<{S}> <{P}> "a\\"b\\nc" .\n')
        assert result.data[0][2] == Literal('a"b\nc')

    def test_bnodes_keep_the_prefix(self):
        result = read_ntriples(f'_:genid1 <{P}> _:genid2 .\n')
        subject, _, obj = result.data[0]
        assert subject.is_bnode()
        assert obj.is_bnode()
        assert subject != obj

    def test_same_label_is_same_node(self):
        result = read_ntriples(f'_:a <{P}> "1" .\n_:a <{P}> "2" .\n')
        assert result.data[0][0] == result.data[1][0]

    def test_empty_input(self):
        result = read_ntriples("")
        assert result.ok
        assert result.data == []

    def test_serializer_output_reads_back(self):
        graph = Graph()
        graph.add(S, P, Literal('quote " and \\ backslash\r\n', lang="en"))
        graph.add(S, P, Literal("typed", datatype=T))
        result = read_ntriples(serialize(graph, "ntriples").data)
        assert result.data == list(graph.triples())

    def test_typed_literals_keep_their_lexical_form(self):
        xsd = "http://www.w3.org/2001/XMLSchema#"
        text = (
            f'<{S}> <{P}> "01"^^<{xsd}integer> .\n'
            f'<{S}> <{P}> "1.50"^^<{xsd}decimal> .\n'
            f'<{S}> <{P}> "1"^^<{xsd}boolean> .\n'
            f'<{S}> <{P}> "1e0"^^<{xsd}double> .\n'
            f'<{S}> <{P}> "2020-01-01T00:00:00.000Z"^^<{xsd}dateTime> .\n'
        )
        result = read_ntriples(text)
        assert result.ok
        assert [obj for _, _, obj in result.data] == [
            Literal("01", datatype=f"{xsd}integer"),
            Literal("1.50", datatype=f"{xsd}decimal"),
            Literal("1", datatype=f"{xsd}boolean"),
            Literal("1e0", datatype=f"{xsd}double"),
            Literal("2020-01-01T00:00:00.000Z", datatype=f"{xsd}dateTime"),
        ]

        graph = Graph()
        graph.add_all(result.data)
        assert serialize(graph, "ntriples").data == text

    def test_xml_literal_is_kept_verbatim(self):
        xml_literal = "http://www.w3.org/1999/02/22-rdf-syntax-ns#XMLLiteral"
        text = f'<{S}> <{P}> "\\n  <p>Some <em>HTML</em></p>\\n"^^<{xml_literal}> .\n'
        result = read_ntriples(text)
        assert result.data[0][2] == Literal("\n  <p>Some <em>HTML</em></p>\n", datatype=xml_literal)

    def test_garbage_fails(self):
        result = read_ntriples("this is not n-triples\n")
        assert not result.ok
        assert result.kind == ErrorKind.TOOL_EXECUTION_FAILED
