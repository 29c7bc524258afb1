#!/usr/bin/env python3


# part of the Twain software package
# Copyright 2021-2023 by Larry Hastings
# All rights reserved.
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.



import os.path
import sys
import unittest

sys.path.insert(1, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from twain import index


class IndexTests(unittest.TestCase):

    def test_insert_and_lookup(self):
        i = index.Index(4)
        i.insert("a", 1)
        self.assertEqual(i.lookup("a"), 1)
        self.assertEqual(i["a"], 1)
        self.assertIsNone(i.lookup("b"))
        self.assertEqual(i.lookup("b", "default"), "default")
        self.assertTrue(i.contains("a"))
        self.assertIn("a", i)
        self.assertNotIn("b", i)

    def test_two_keys_one_value(self):
        i = index.Index(4)
        value = ["shared"]
        i.insert("p", value)
        i.insert("port", value)
        self.assertIs(i.lookup("p"), i.lookup("port"))
        i.lookup("p").append("mutated")
        self.assertEqual(i.lookup("port"), ["shared", "mutated"])
        self.assertEqual(i.size(), 2)
        self.assertEqual(len(i), 2)

    def test_replace_doesnt_grow(self):
        i = index.Index(1)
        i.insert("a", 1)
        i.insert("a", 2)
        self.assertEqual(i.lookup("a"), 2)
        self.assertEqual(i.size(), 1)
        self.assertEqual(i.total_slots(), 1)

    def test_slots_grow(self):
        i = index.Index(2)
        self.assertEqual(i.total_slots(), 2)
        i.insert("a", 1)
        i.insert("b", 2)
        self.assertEqual(i.total_slots(), 2)
        i.insert("c", 3)
        self.assertEqual(i.total_slots(), 4)
        self.assertEqual(i.size(), 3)

    def test_bad_size(self):
        with self.assertRaises(ValueError):
            index.Index(0)

    def test_keys_must_be_str(self):
        i = index.Index()
        with self.assertRaises(TypeError):
            i.insert(1, "one")

    def test_remove(self):
        i = index.Index()
        i.insert("a", 1)
        self.assertEqual(i.remove("a"), 1)
        self.assertNotIn("a", i)
        with self.assertRaises(KeyError):
            i.remove("a")

    def test_items_is_a_snapshot(self):
        i = index.Index()
        i.insert("a", 1)
        i.insert("b", 2)
        for key, value in i.items():
            i.remove(key)
        self.assertEqual(i.size(), 0)
        self.assertEqual(i.keys(), [])

    def test_iteration_order(self):
        i = index.Index()
        for key in "cab":
            i.insert(key, key.upper())
        self.assertEqual(list(i), ["c", "a", "b"])
        self.assertEqual(i.items(), [("c", "C"), ("a", "A"), ("b", "B")])

    def test_destroy(self):
        i = index.Index()
        i.insert("a", 1)
        i.destroy()
        i.destroy()
        self.assertEqual(i.size(), 0)
        self.assertIsNone(i.lookup("a"))
        self.assertIn("destroyed", repr(i))
        with self.assertRaises(index.IndexDestroyedError):
            i.insert("b", 2)


if __name__ == "__main__":
    unittest.main()
