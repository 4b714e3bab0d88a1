"""
Decoding of string and numeric literals used as member names.

Member names feed the generator's symbol table, so a literal name is turned into
the value it denotes: `'it\\'s'` names the member `it's` and `0x10` names it `16`.
"""

import math
from decimal import Decimal

import tree_sitter

_SIMPLE_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    'b': '\b',
    'f': '\f',
    'v': '\v',
}

_LINE_TERMINATORS = ('\n', '\r\n', '\r', '\u2028', '\u2029')

_RADIX_PREFIXES = {'x': 16, 'o': 8, 'b': 2}


def decode_escape_sequence(text: str) -> str:
    """Decode one escape sequence, including its leading backslash."""
    body = text[1:]
    if body in _LINE_TERMINATORS:
        return ''
    head = body[0]
    if head in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[head]
    if body.isdigit() and all(c in '01234567' for c in body):
        return chr(int(body, 8))
    if head == 'x':
        return chr(int(body[1:], 16))
    if head == 'u':
        if body[1:2] == '{':
            return chr(int(body[2:-1], 16))
        return chr(int(body[1:5], 16))
    return body


def decode_string_literal(node: tree_sitter.Node) -> str:
    """Return the value of a `string` node."""
    parts = []
    for child in node.named_children:
        text = str(child.text, encoding='utf-8')
        if child.type == 'escape_sequence':
            parts.append(decode_escape_sequence(text))
        else:
            parts.append(text)
    # \uXXXX escapes may spell a surrogate pair
    return ''.join(parts).encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'surrogatepass')


def number_to_string(value: float) -> str:
    """Format a number the way JavaScript's Number#toString does."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    shortest = repr(value)
    exponent = Decimal(shortest).adjusted()
    if -7 < exponent < 21:
        return format(Decimal(shortest), 'f')
    mantissa, _, power = shortest.partition('e')
    power = int(power)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def normalize_numeric_literal(text: str) -> str:
    """Return the canonical name denoted by a numeric literal.

    Plain integers keep their digits, radix-prefixed and legacy octal literals
    become decimal, and literals with a fraction or exponent are reformatted.
    """
    text = text.replace('_', '')
    lowered = text.lower()
    if lowered.endswith('n'):
        return text
    if len(lowered) > 2 and lowered[0] == '0' and lowered[1] in _RADIX_PREFIXES:
        return number_to_string(float(int(text[2:], _RADIX_PREFIXES[lowered[1]])))
    if len(text) > 1 and text[0] == '0' and text.isdigit():
        if all(c in '01234567' for c in text):
            return number_to_string(float(int(text, 8)))
        return number_to_string(float(text))
    if '.' in text or 'e' in lowered:
        return number_to_string(float(text))
    return text
