# SPDX-FileCopyrightText: the properuri contributors
#
# SPDX-License-Identifier: MIT

"""
Errors raised by properuri

Encoding is total by default; these are only raised when a caller explicitly
asks for strict surrogate checking with ``strict=True``.
"""


class Error(Exception):
    """
    Base exception for all exceptions raised by properuri
    """


class UnpairedSurrogateError(Error, ValueError):
    """
    The input contained a high surrogate not followed by a low surrogate, or a
    low surrogate not preceded by a high one.
    """

    def __init__(self, index, unit):
        super().__init__(index, unit)
        self.index = index  #: Offset of the offending code unit in UTF-16 units
        self.unit = unit  #: Value of the offending code unit

    def __str__(self):
        kind = "high" if self.unit < 0xDC00 else "low"
        return "Unpaired %s surrogate U+%04X at code unit %d" % (
            kind,
            self.unit,
            self.index,
        )

    def __repr__(self):
        return "<%s: U+%04X at %d>" % (type(self).__name__, self.unit, self.index)
