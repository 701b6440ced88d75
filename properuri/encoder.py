# SPDX-FileCopyrightText: the properuri contributors
#
# SPDX-License-Identifier: MIT

"""Percent-encoding of text against a safe-set

The input string is processed as a sequence of UTF-16 code units, which is
how the same algorithm behaves in environments with UTF-16 strings: a high
surrogate is always consumed together with the unit that follows it, and
characters outside the Basic Multilingual Plane can be given either as a
single code point or spelled out as two surrogate code points.

>>> encode_uri("https://www.example.com/azAZäöü")
'https://www.example.com/azAZ%C3%A4%C3%B6%C3%BC'
>>> encode_uri_component("a b&c=d/e")
'a%20b%26c%3Dd%2Fe'
>>> encode_uri("\\U0001F4A9") == encode_uri("\\ud83d\\udca9") == "%F0%9F%92%A9"
True

Unpaired surrogates do not make the encoding fail; a high surrogate is
combined positionally with its neighbour (or with a zero unit at the end of
the text). Pass ``strict=True`` to get an
:class:`.error.UnpairedSurrogateError` instead.
"""

import logging
import struct

from .charsets import URI_SAFE, URI_COMPONENT_SAFE
from .error import UnpairedSurrogateError

log = logging.getLogger("properuri.encoder")


def utf16_units(text):
    """Return the UTF-16 code units of text as a tuple of ints

    Surrogate code points that are present in the string as such are kept as
    single units.

    >>> utf16_units("a\\u00e4\\U0001F4A9")
    (97, 228, 55357, 56489)
    """
    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack("<%dH" % (len(data) // 2), data)


def extract_characters(units):
    """Iterate over (index, character) pairs, where character is a tuple of
    one code unit, or of two if the first is a high surrogate.

    >>> list(extract_characters((0x41, 0xD83D, 0xDCA9, 0x42)))
    [(0, (65,)), (1, (55357, 56489)), (3, (66,))]

    A high surrogate at the very end of the input is yielded alone."""
    i = 0
    end = len(units)
    while i < end:
        if 0xD800 <= units[i] < 0xDC00:
            yield i, tuple(units[i:i + 2])
            i += 2
        else:
            yield i, (units[i],)
            i += 1


def utf8_bytes(character):
    """UTF-8 bytes for a character as produced by :func:`extract_characters`

    >>> utf8_bytes((0xA9,))
    b'\\xc2\\xa9'
    >>> utf8_bytes((0xD83D, 0xDCA9))
    b'\\xf0\\x9f\\x92\\xa9'
    """
    unit = character[0]

    if unit < 0x80:
        return bytes((unit,))
    elif unit < 0x800:
        return bytes((
            0xC0 | (unit >> 6),
            0x80 | (unit & 0x3F),
            ))
    elif not 0xD800 <= unit < 0xDC00:
        # Lone low surrogates end up here too, as their 3-byte form
        return bytes((
            0xE0 | (unit >> 12),
            0x80 | ((unit >> 6) & 0x3F),
            0x80 | (unit & 0x3F),
            ))
    else:
        low = character[1] if len(character) > 1 else 0
        # The masks equal subtracting 0xD800 / 0xDC00 for well-formed pairs
        code_point = 0x10000 + (((unit & 0x3FF) << 10) | (low & 0x3FF))
        return bytes((
            0xF0 | (code_point >> 18),
            0x80 | ((code_point >> 12) & 0x3F),
            0x80 | ((code_point >> 6) & 0x3F),
            0x80 | (code_point & 0x3F),
            ))


def percent_triplets(character):
    """Percent-encoded UTF-8 form of a character, one triplet per byte

    >>> percent_triplets((0x29ED,))
    '%E2%A7%AD'
    """
    return "".join("%%%02X" % b for b in utf8_bytes(character))


def _unpaired_surrogate(index, character):
    """Return (index, unit) of an unpaired surrogate in character, or None"""
    unit = character[0]
    if 0xD800 <= unit < 0xDC00:
        if len(character) < 2 or not 0xDC00 <= character[1] < 0xE000:
            return index, unit
    elif 0xDC00 <= unit < 0xE000:
        return index, unit
    return None


def encode(text, safe, *, strict=False):
    """Percent-encode every character of text that is not in the
    :class:`.charsets.SafeSet` safe.

    None and the empty string both result in an empty string. Characters
    are classified as extracted: a high surrogate that was paired
    positionally with a safe unit is passed through along with it.

    >>> encode("\\ud83dA", URI_SAFE) == "\\ud83dA"
    True

    Only if strict is set, unpaired surrogates raise
    :class:`.error.UnpairedSurrogateError` instead.
    """
    if text is None or text == "":
        return ""
    if not isinstance(text, str):
        raise TypeError("Can only encode str, not %s" % type(text).__name__)

    result = []
    for index, character in extract_characters(utf16_units(text)):
        unpaired = _unpaired_surrogate(index, character)
        if unpaired is not None:
            if strict:
                raise UnpairedSurrogateError(*unpaired)
            log.debug("Passing unpaired surrogate U+%04X at code unit %d on positionally", unpaired[1], unpaired[0])

        if any(safe.matches(unit) for unit in character):
            result.append("".join(chr(unit) for unit in character))
        else:
            result.append(percent_triplets(character))

    return "".join(result)


def encode_uri(text, *, strict=False):
    """Encode a full URI, leaving reserved and unreserved characters of RFC3986
    alone

    >>> encode_uri("https://www.example.com:8080/foo?bar=baz#frag")
    'https://www.example.com:8080/foo?bar=baz#frag'
    >>> encode_uri("\\r")
    '%0D'
    """
    return encode(text, URI_SAFE, strict=strict)


def encode_uri_component(text, *, strict=False):
    """Encode a URI component (eg. a single query argument or path segment),
    leaving only unreserved characters and ``!'()*`` alone

    >>> encode_uri_component(";,/?:@&=+$#")
    '%3B%2C%2F%3F%3A%40%26%3D%2B%24%23'
    """
    return encode(text, URI_COMPONENT_SAFE, strict=strict)
