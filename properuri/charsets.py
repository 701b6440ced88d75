# SPDX-FileCopyrightText: the properuri contributors
#
# SPDX-License-Identifier: MIT

"""Character classes from RFC3986 and the safe-sets built from them

A safe-set is an ordered sequence of character classes; a character that is
a member of any of them is passed through by the encoder unchanged. The
classes are matched by code unit value, so membership tests never involve a
regular expression engine.

>>> "~" in UNRESERVED
True
>>> URI_SAFE.matches(ord("/"))
True
>>> URI_COMPONENT_SAFE.matches(ord("/"))
False
"""

import string


class CharacterClass(frozenset):
    """Immutable set of characters, tested against code unit values

    Only ASCII characters can be members, as the encoder only ever checks
    single code units against them; anything outside ASCII is always
    escaped.

    >>> digits = CharacterClass("digit", string.digits)
    >>> ord("7") in digits, "7" in digits, "x" in digits
    (True, True, False)
    """

    def __new__(cls, name, characters):
        units = [ord(c) for c in characters]
        if any(u >= 128 for u in units):
            raise ValueError("Character classes can only contain ASCII characters")
        self = super().__new__(cls, units)
        self.name = name
        return self

    def __reduce__(self):
        return (type(self), (self.name, "".join(chr(u) for u in sorted(self))))

    def __contains__(self, item):
        if isinstance(item, str):
            return len(item) == 1 and super().__contains__(ord(item))
        return super().__contains__(item)

    def __repr__(self):
        return "<%s %s: %r>" % (
            type(self).__name__,
            self.name,
            "".join(sorted(chr(u) for u in self)),
        )


#: "gen-delims" characters from RFC3986
GEN_DELIMS = CharacterClass("gen-delims", ":/?#[]@")

#: "sub-delims" characters from RFC3986
SUB_DELIMS = CharacterClass("sub-delims", "!$&'()*+,;=")

#: The "sub-delims" that RFC5987's attr-char and JavaScript's
#: encodeURIComponent leave alone
COMPONENT_SUB_DELIMS = CharacterClass("component-sub-delims", "!'()*")

#: "unreserved" characters from RFC3986
UNRESERVED = CharacterClass("unreserved", string.ascii_letters + string.digits + "-._~")


class SafeSet(tuple):
    """Ordered, immutable sequence of :class:`CharacterClass` objects

    Classes are tested in order, and testing stops at the first match.

    >>> digits_only = SafeSet("digits", [CharacterClass("digit", string.digits)])
    >>> digits_only.matches(ord("4")), digits_only.matches(ord("a"))
    (True, False)
    """

    def __new__(cls, name, classes):
        self = super().__new__(cls, classes)
        self.name = name
        return self

    def __reduce__(self):
        return (type(self), (self.name, list(self)))

    def matches(self, unit):
        """Return True if the code unit is a member of any class"""
        for character_class in self:
            if unit in character_class:
                return True
        return False

    def characters(self):
        """All safe characters as a string, in code unit order"""
        return "".join(chr(u) for u in sorted(set().union(*self)))

    def __repr__(self):
        return "<%s %s: %s>" % (
            type(self).__name__,
            self.name,
            ", ".join(c.name for c in self),
        )


#: Characters left unescaped by :func:`properuri.encode_uri`
URI_SAFE = SafeSet("uri", [GEN_DELIMS, SUB_DELIMS, UNRESERVED])

#: Characters left unescaped by :func:`properuri.encode_uri_component`
URI_COMPONENT_SAFE = SafeSet("uri-component", [COMPONENT_SUB_DELIMS, UNRESERVED])
