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

"""Character escaping for N-Triples IRIs and literals.

Both tables are fixed at import time and applied with str.translate, which
is a single pass: replacement text is never escaped again.

IRI table — characters forbidden by the IRIREF production
(https://www.w3.org/TR/n-triples/#grammar-production-IRIREF): every code
point from U+0000 to U+0020 plus  < > " { } | ^ ` \\  becomes a \\uXXXX escape.

Literal table — the STRING_LITERAL_QUOTE escapes
(https://www.w3.org/TR/n-triples/#grammar-production-STRING_LITERAL_QUOTE):
only newline, carriage return, double quote and backslash. Other control
characters are emitted as-is inside literals.
"""

from __future__ import annotations

from types import MappingProxyType

_IRI_FORBIDDEN = '<>"{}|^`\\'

IRI_ESCAPES = MappingProxyType({
    **{code: f"\\u{code:04X}" for code in range(0x00, 0x21)},
    **{ord(ch): f"\\u{ord(ch):04X}" for ch in _IRI_FORBIDDEN},
})

LITERAL_ESCAPES = MappingProxyType({
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord('"'): '\\"',
    ord("\\"): "\\\\",
})


def escape_iri(text: str) -> str:
    return text.translate(IRI_ESCAPES)


def escape_literal(text: str) -> str:
    return text.translate(LITERAL_ESCAPES)
