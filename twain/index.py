# The string-keyed index that maps option spellings to Option records.
#
# We keep it as a standalone module instead of folding it
# in to twain proper just to ensure it remains easy to test.

# please leave this copyright notice in binary distributions.
license = """
twain/index.py
part of the Twain software package
Copyright 2021-2023 by Larry Hastings
All rights reserved.

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included
in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""


class IndexDestroyedError(RuntimeError):
    """
    Raised when you insert into an Index after calling destroy().
    """
    pass


class Index:
    """
    Associative structure from string key to value.

    An Index never copies the values it stores.  Two keys may
    (and for options with both a short and a long spelling, do)
    refer to the very same object.

    "size" is the number of slots to reserve.  It's only a hint;
    when the Index fills up, the slot count doubles.  The slot
    count is reported by total_slots(), and it's what you'd use
    to size a companion structure for a full scan.
    """

    def __init__(self, size=16):
        if size < 1:
            raise ValueError(f"Index size must be at least 1, not {size!r}")
        self.slots = size
        self.d = {}
        self.destroyed = False

    def __repr__(self):
        state = " destroyed" if self.destroyed else ""
        return f"<Index {len(self.d)}/{self.slots}{state}>"

    def insert(self, key, value):
        if self.destroyed:
            raise IndexDestroyedError(f"can't insert {key!r}, Index was destroyed")
        if not isinstance(key, str):
            raise TypeError(f"Index keys must be str, not {type(key).__name__}")
        if (key not in self.d) and (len(self.d) >= self.slots):
            self.slots *= 2
        self.d[key] = value

    def lookup(self, key, default=None):
        return self.d.get(key, default)

    def contains(self, key):
        return key in self.d

    def remove(self, key):
        """
        Removes key from the Index and returns the value it mapped to.
        Raises KeyError if key isn't present.
        """
        return self.d.pop(key)

    def size(self):
        return len(self.d)

    def total_slots(self):
        return self.slots

    def keys(self):
        return list(self.d)

    def items(self):
        # a snapshot, so callers can remove() while they scan.
        return list(self.d.items())

    def destroy(self):
        """
        Drops every key.  Safe to call more than once.
        """
        self.d.clear()
        self.destroyed = True

    __len__ = size
    __contains__ = contains

    def __getitem__(self, key):
        return self.d[key]

    def __iter__(self):
        return iter(self.keys())
