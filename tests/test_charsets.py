# SPDX-FileCopyrightText: the properuri contributors
#
# SPDX-License-Identifier: MIT

import copy
import pickle
import string
import unittest

from properuri.charsets import (
    CharacterClass,
    SafeSet,
    GEN_DELIMS,
    SUB_DELIMS,
    COMPONENT_SUB_DELIMS,
    UNRESERVED,
    URI_SAFE,
    URI_COMPONENT_SAFE,
)


class TestCharacterClass(unittest.TestCase):
    def test_membership(self):
        self.assertIn("~", UNRESERVED)
        self.assertIn(ord("~"), UNRESERVED)
        self.assertNotIn("%", UNRESERVED)
        self.assertNotIn("ab", UNRESERVED)
        self.assertNotIn("ä", UNRESERVED)

    def test_ascii_only(self):
        self.assertRaises(ValueError, CharacterClass, "umlauts", "äöü")

    def test_immutable(self):
        self.assertFalse(hasattr(GEN_DELIMS, "add"))

    def test_rfc3986_classes(self):
        self.assertEqual(GEN_DELIMS, {ord(c) for c in ":/?#[]@"})
        self.assertEqual(SUB_DELIMS, {ord(c) for c in "!$&'()*+,;="})
        self.assertTrue(COMPONENT_SUB_DELIMS < SUB_DELIMS)
        self.assertEqual(
            UNRESERVED,
            {ord(c) for c in string.ascii_letters + string.digits + "-._~"},
        )

    def test_repr(self):
        self.assertEqual(repr(GEN_DELIMS), "<CharacterClass gen-delims: '#/:?@[]'>")


class TestSafeSet(unittest.TestCase):
    def test_characters(self):
        self.assertEqual(
            URI_COMPONENT_SAFE.characters(),
            "!'()*-.0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz~",
        )

    def test_component_is_strict_subset(self):
        self.assertTrue(
            set(URI_COMPONENT_SAFE.characters()) < set(URI_SAFE.characters())
        )

    def test_order(self):
        self.assertEqual([c.name for c in URI_SAFE], ["gen-delims", "sub-delims", "unreserved"])
        self.assertEqual([c.name for c in URI_COMPONENT_SAFE], ["component-sub-delims", "unreserved"])

    def test_matches(self):
        for character in URI_SAFE.characters():
            self.assertTrue(URI_SAFE.matches(ord(character)))
        for unit in (0x00, 0x20, 0x25, 0x7F, 0xE4, 0xD83D):
            self.assertFalse(URI_SAFE.matches(unit))
            self.assertFalse(URI_COMPONENT_SAFE.matches(unit))

    def test_empty(self):
        self.assertFalse(SafeSet("nothing", []).matches(ord("a")))
        self.assertEqual(SafeSet("nothing", []).characters(), "")


class TestCopying(unittest.TestCase):
    def test_character_class(self):
        for duplicate in (
            copy.copy(SUB_DELIMS),
            copy.deepcopy(SUB_DELIMS),
            pickle.loads(pickle.dumps(SUB_DELIMS)),
        ):
            self.assertIsInstance(duplicate, CharacterClass)
            self.assertEqual(duplicate, SUB_DELIMS)
            self.assertEqual(duplicate.name, "sub-delims")

    def test_safe_set(self):
        for duplicate in (
            copy.copy(URI_COMPONENT_SAFE),
            copy.deepcopy(URI_COMPONENT_SAFE),
            pickle.loads(pickle.dumps(URI_COMPONENT_SAFE)),
        ):
            self.assertIsInstance(duplicate, SafeSet)
            self.assertEqual(duplicate, URI_COMPONENT_SAFE)
            self.assertEqual(duplicate.name, "uri-component")
            self.assertEqual(duplicate.characters(), URI_COMPONENT_SAFE.characters())
            self.assertEqual([c.name for c in duplicate], ["component-sub-delims", "unreserved"])
