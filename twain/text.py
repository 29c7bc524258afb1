import itertools
from itertools import zip_longest
import operator

# please leave this copyright notice in binary distributions.
license = """
twain/text.py
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


def split_words(s):
    """
    Splits a string into words, suitable for feeding into wrap_words().

    Runs of spaces and tabs separate words.  A line break inside
    a paragraph is just more whitespace; a blank line ends the
    paragraph, and is represented in the output by two empty
    strings (one to end the current line, one for the blank line).
    """
    words = []
    for paragraph in _paragraphs(s):
        if words:
            words.extend(('', ''))
        words.extend(paragraph.split())
    return words

def _paragraphs(s):
    lines = s.expandtabs().split('\n')
    for blank, group in itertools.groupby(lines, key=lambda line: not line.strip()):
        if not blank:
            yield " ".join(group)


def wrap_words(words, margin=79, *, two_spaces=False):
    """
    Combines "words" into lines and returns the result as a string.

    "words" should be an iterable containing pre-split text,
    as produced by split_words().  An empty string forces a
    line break.

    "margin" specifies the maximum length of each line.  A single
    word longer than "margin" gets a line to itself; it is never
    broken.

    If "two_spaces" is true, words that end in sentence-ending
    punctuation ('.', '?', and '!') will be followed by two spaces,
    not one.
    """
    col = 0
    lastword = ''
    text = []

    for word in words:
        l = len(word)

        if not l:
            lastword = word
            col = 0
            text.append('\n')
            continue

        if two_spaces and lastword.endswith(('.', '?', '!')):
            space = "  "
        else:
            space = " "

        if (l + len(space) + col) > margin:
            if col:
                text.append('\n')
                col = 0
        elif col:
            text.append(space)
            col += len(space)

        text.append(word)
        col += l
        lastword = word

    return "".join(text)


def _max_line_length(lines):
    return max([len(line) for line in lines])

def merge_columns(*blobs, column_spacing=1):
    """
    Merge n blobs containing text together, each blob getting
    its own column.

    Each "blob" is a tuple of three items:
        (text, min_width, max_width)
    Text should be a single text string, with newline
    characters separating lines.

    The width of each column is the length of its longest line
    plus column_spacing, clamped to the range [min_width, max_width].
    Each line of text is padded with spaces to bring it up to this
    width.

    If a column's longest line is wider than its max_width, every
    later column waits: the overlong column's lines print by
    themselves until the last overlong line, and the later columns
    resume on the line after that.  So

        merge_columns(("-x, --extraordinarily-long-option", 10, 10),
                      ("Does a thing.", 0, 40))

    returns

        -x, --extraordinarily-long-option
                  Does a thing.

    Lines are .rstrip()ped, and so is the result.
    This function does not text-wrap the lines.
    """
    columns = []
    widths = []
    last_too_wide_lines = []

    for s, min_width, max_width in blobs:
        # check types, let them raise exceptions as needed
        assert isinstance(s, str)
        operator.index(min_width)
        operator.index(max_width)

        lines = s.rstrip().split('\n')
        columns.append(lines)

        measured_width = _max_line_length(lines) + column_spacing
        width = min(max_width, max(min_width, measured_width))
        widths.append(width)

        last_too_wide_line = -1
        if measured_width > max_width:
            for i, line in enumerate(lines):
                if (len(line) + column_spacing) > max_width:
                    last_too_wide_line = i
        last_too_wide_lines.append(last_too_wide_line)

    # columns after an overlong one are held back until it's done.
    delays = []
    delay = 0
    for lines, last_too_wide_line in zip(columns, last_too_wide_lines):
        delays.append(delay)
        if last_too_wide_line >= 0:
            delay = max(delay, delays[-1] + last_too_wide_line + 1)

    height = max(d + len(lines) for d, lines in zip(delays, columns))

    output = []
    for row in range(height):
        line = []
        for lines, width, delay, last_too_wide_line in zip_longest(columns, widths, delays, last_too_wide_lines):
            i = row - delay
            if 0 <= i < len(lines):
                column = lines[i]
                if i <= last_too_wide_line:
                    line.append(column)
                    break
                column = column.ljust(width)
            else:
                column = " " * width
            line.append(column)
        output.append("".join(line).rstrip())

    return "\n".join(output).rstrip()
