"""JSON pretty-printing and token colouring for invite payloads.

The tokenizer only classifies text, it never changes it: joining the text of
every token gives back the input, so markup added around tokens can always be
stripped to recover the exact JSON.
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, NamedTuple

from markupsafe import Markup, escape
from pygments.lexers import JsonLexer
from pygments.token import Keyword, Name, Number, Punctuation, String, Text

# Styled kinds; everything else renders in the plain colour.
HIGHLIGHTED_KINDS = frozenset({"property", "string", "number", "boolean", "null"})

_ANSI_COLOURS = {
    "property": "\x1b[92m",
    "string": "\x1b[95m",
    "number": "\x1b[35m",
    "boolean": "\x1b[96m",
    "null": "\x1b[96m",
}
_ANSI_RESET = "\x1b[0m"

_MERGED_KINDS = frozenset({"plain", "whitespace"})

_lexer = JsonLexer()


class Token(NamedTuple):
    kind: str
    text: str


def js_number(value: float) -> str:
    """Write a float the way JavaScript's Number#toString does.

    1.0 becomes ``1``, 1e-7 stays ``1e-7`` and 1e21 becomes ``1e+21``.
    """
    if not math.isfinite(value):
        # JSON.stringify writes NaN and the infinities as null
        return "null"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        text = f"{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"
    return f"-{text}" if sign else text


class _JavaScriptEncoder(json.JSONEncoder):
    """JSONEncoder that writes floats with js_number."""

    def iterencode(self, o, _one_shot=False):
        if self.ensure_ascii:
            encoder = json.encoder.encode_basestring_ascii
        else:
            encoder = json.encoder.encode_basestring
        indent = " " * self.indent if isinstance(self.indent, int) else self.indent
        return json.encoder._make_iterencode(
            {} if self.check_circular else None,
            self.default,
            encoder,
            indent,
            js_number,
            self.key_separator,
            self.item_separator,
            self.sort_keys,
            self.skipkeys,
            _one_shot,
        )(o, 0)


def format_payload(payload: Any) -> str:
    """Serialise with two-space indent, the same text JSON.stringify(value, null, 2) gives."""
    return json.dumps(payload, cls=_JavaScriptEncoder, indent=2, ensure_ascii=False)


def _kind(tokentype, value: str) -> str:
    if tokentype in Name.Tag:
        return "property"
    if tokentype in String:
        return "string"
    if tokentype in Number:
        return "number"
    if tokentype in Keyword.Constant:
        return "null" if value == "null" else "boolean"
    if tokentype in Punctuation:
        return "operator" if value == ":" else "punctuation"
    if tokentype in Text and value.isspace():
        return "whitespace"
    return "plain"


def tokenize_json(text: str) -> list[Token]:
    tokens: list[Token] = []
    # Unprocessed tokens: the lexer does no newline or tab rewriting here
    for _, tokentype, value in _lexer.get_tokens_unprocessed(text):
        kind = _kind(tokentype, value)
        if tokens and kind in _MERGED_KINDS and tokens[-1].kind == kind:
            tokens[-1] = Token(kind, tokens[-1].text + value)
        else:
            tokens.append(Token(kind, value))
    return tokens


def highlight_html(text: str) -> Markup:
    parts = []
    for token in tokenize_json(text):
        if token.kind in HIGHLIGHTED_KINDS:
            parts.append(Markup('<span class="token {}">{}</span>').format(token.kind, token.text))
        else:
            parts.append(escape(token.text))
    return Markup("").join(parts)


def highlight_ansi(text: str) -> str:
    out = []
    for token in tokenize_json(text):
        colour = _ANSI_COLOURS.get(token.kind)
        out.append(f"{colour}{token.text}{_ANSI_RESET}" if colour else token.text)
    return "".join(out)
