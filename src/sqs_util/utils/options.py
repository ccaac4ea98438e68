"""
Module: options.py
Description: Option-string parsing for key=value command-line arguments.

Turns strings such as 'env=prod,team="core platform"' into dictionaries
and space delimited argument strings into lists. Every function here is
pure and safe to call from anywhere.

Key Components:
- parse_options(): comma separated key=value pairs into a dict
- tokenize(): whitespace separated arguments into a list
- unquote() / quote(): one layer of string literal quoting
- format_options(): canonical key="value" serialization of a dict

Dependencies: typing
Author: sqs_util Team
"""

from typing import Dict, List, Tuple

_SIMPLE_ESCAPES = {
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
    '\\': '\\',
}

_QUOTE_ESCAPES = {
    '\a': '\\a',
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\v': '\\v',
    '\\': '\\\\',
    '"': '\\"',
    ',': '\\x2c',
}

_HEX_WIDTHS = {'x': 2, 'u': 4, 'U': 8}
_HEX_DIGITS = set('0123456789abcdefABCDEF')
_OCTAL_DIGITS = set('01234567')


def _unescape(text: str, pos: int, quote_char: str) -> Tuple[str, int]:
    """
    Decode the escape sequence starting at text[pos] (a backslash).

    Returns:
        Tuple of the decoded character and the position after the sequence

    Raises:
        ValueError: If the escape sequence is unknown or truncated
    """
    if pos + 1 >= len(text):
        raise ValueError("invalid syntax: truncated escape sequence")

    code = text[pos + 1]
    if code in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[code], pos + 2

    # Only the enclosing quote character may be escaped
    if code in ('"', "'"):
        if code != quote_char:
            raise ValueError(f"invalid syntax: unexpected escape \\{code}")
        return code, pos + 2

    if code in _HEX_WIDTHS:
        width = _HEX_WIDTHS[code]
        digits = text[pos + 2:pos + 2 + width]
        if len(digits) != width or not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"invalid syntax: bad \\{code} escape")
        value = int(digits, 16)
        if code != 'x' and (value > 0x10FFFF or 0xD800 <= value <= 0xDFFF):
            raise ValueError(f"invalid syntax: \\{code}{digits} is not a valid code point")
        return chr(value), pos + 2 + width

    if code in _OCTAL_DIGITS:
        digits = text[pos + 1:pos + 4]
        if len(digits) != 3 or not set(digits) <= _OCTAL_DIGITS:
            raise ValueError("invalid syntax: bad octal escape")
        value = int(digits, 8)
        if value > 0o377:
            raise ValueError("invalid syntax: octal escape out of range")
        return chr(value), pos + 4

    raise ValueError(f"invalid syntax: unknown escape \\{code}")


def unquote(text: str) -> str:
    """
    Strip one layer of quoting from a string literal.

    Accepts double quoted strings with backslash escapes, backtick
    quoted raw strings and single quoted one-character literals.

    Args:
        text: Quoted string literal

    Returns:
        The literal value with the quotes removed and escapes decoded

    Raises:
        ValueError: If text is not a well-formed quoted literal

    Example:
        >>> unquote('"hello\\tworld"')
        'hello\\tworld'
    """
    if len(text) < 2:
        raise ValueError("invalid syntax: too short to be quoted")

    quote_char = text[0]
    if quote_char != text[-1]:
        raise ValueError("invalid syntax: mismatched quotes")
    body = text[1:-1]

    if quote_char == '`':
        if '`' in body:
            raise ValueError("invalid syntax: backtick inside raw string")
        return body.replace('\r', '')

    if quote_char not in ('"', "'"):
        raise ValueError("invalid syntax: not a quoted string")
    if '\n' in body:
        raise ValueError("invalid syntax: newline inside quoted string")

    chars: List[str] = []
    pos = 0
    while pos < len(body):
        char = body[pos]
        if char == quote_char:
            raise ValueError("invalid syntax: unescaped quote inside string")
        if char == '\\':
            char, pos = _unescape(body, pos, quote_char)
        else:
            pos += 1
        chars.append(char)

    if quote_char == "'" and len(chars) != 1:
        raise ValueError("invalid syntax: character literal must hold exactly one character")

    return ''.join(chars)


def quote(text: str) -> str:
    """
    Return text as a double quoted literal that unquote() reverses.
    """
    out = ['"']
    for char in text:
        if char in _QUOTE_ESCAPES:
            out.append(_QUOTE_ESCAPES[char])
        elif char.isprintable():
            out.append(char)
        else:
            code_point = ord(char)
            if code_point < 0x80:
                out.append(f"\\x{code_point:02x}")
            elif code_point < 0x10000:
                out.append(f"\\u{code_point:04x}")
            else:
                out.append(f"\\U{code_point:08x}")
    out.append('"')
    return ''.join(out)


def parse_options(data: str) -> Dict[str, str]:
    """
    Parse a comma separated key=value option string into a dictionary.

    The whole string and each value may carry one layer of quoting,
    which is stripped when well-formed and kept as literal text
    otherwise. A field without '=' maps to an empty value, an empty
    field (e.g. from a trailing comma) maps '' to '', and repeated keys
    keep the last value. Never raises.

    Args:
        data: Option string such as 'foo=bar,bar=foo,hello=world'

    Returns:
        Dictionary of option keys to values

    Example:
        >>> parse_options('env=prod,team="core platform"')
        {'env': 'prod', 'team': 'core platform'}
    """
    options: Dict[str, str] = {}
    if not data:
        return options

    try:
        sanitized = unquote(data)
    except ValueError:
        sanitized = data

    for field in sanitized.split(','):
        key, separator, raw_value = field.partition('=')
        if separator:
            try:
                value = unquote(raw_value)
            except ValueError:
                value = raw_value
        else:
            value = ''

        options[key] = value

    return options


def format_options(options: Dict[str, str]) -> str:
    """
    Serialize a dictionary as key="value" pairs joined with commas.

    parse_options() reads the result back into the same dictionary as
    long as no key holds ',' or '='. Commas in values are written as \\x2c.
    """
    return ','.join(f"{key}={quote(value)}" for key, value in options.items())


def tokenize(data: str) -> List[str]:
    """
    Split a space delimited argument string into a list.

    Runs of whitespace separate tokens; no quoting is applied.

    Example:
        >>> tokenize('  a   b c ')
        ['a', 'b', 'c']
    """
    if not data:
        return []
    return data.split()
