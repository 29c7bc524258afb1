#!/usr/bin/env python3

"Command-line options that answer to two names.  Short or long, it's the same option."
__version__ = "0.1.0"


# please leave this copyright notice in binary distributions.
license = """
twain/__init__.py
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


import big.all as big
from big.itertools import PushbackIterator
import enum
import os.path
import shlex
import sys

from . import index
from . import text


class TwainBaseException(Exception):
    pass

class ConfigurationError(TwainBaseException):
    """
    Raised when the Twain API is used improperly.
    """
    pass

class AllocationError(TwainBaseException, MemoryError):
    """
    Raised when Python runs out of memory while creating an option.
    """
    pass


class UsageError(TwainBaseException):
    """
    Raised when Twain processes an invalid command-line.

    "option" is the option key the error is about, without
    leading dashes (e.g. "port" or "p").
    """
    def __init__(self, message, option=None):
        super().__init__(message)
        self.option = option

class UnknownOption(UsageError):
    pass

class MissingValue(UsageError):
    pass

class UnexpectedValue(UsageError):
    pass

class MissingRequired(UsageError):
    pass


help_hint = "Use option '--help' for more information."


class ValueKind(enum.Enum):
    NONE = 0       # a flag, e.g. "-v"
    INFO = 1       # e.g. "--help"; stops parsing the moment it's seen
    OPTIONAL = 2
    REQUIRED = 3   # also means the option must appear on the command-line

    @property
    def takes_value(self):
        return self in (ValueKind.OPTIONAL, ValueKind.REQUIRED)

NONE = ValueKind.NONE
INFO = ValueKind.INFO
OPTIONAL = ValueKind.OPTIONAL
REQUIRED = ValueKind.REQUIRED


class Option:
    """
    One declared command-line option.

    An Option with both a short and a long spelling is a single
    object, stored under both keys in the index.  "references"
    counts how many index keys currently point at it.
    """

    def __init__(self, short, long, description, kind, id):
        self.short = short
        self.long = long
        self.description = description
        self.kind = kind
        self.id = id

        self.value = None
        self.provided = False
        self.count = 0
        self.references = 0

    def __repr__(self):
        return f"<Option {self.spelling} kind={self.kind.name} provided={self.provided} count={self.count} value={self.value!r} references={self.references}>"

    @property
    def name(self):
        return self.long or self.short

    @property
    def spelling(self):
        if self.long:
            return "--" + self.long
        return "-" + self.short

    def label(self):
        if self.short and self.long:
            return f"  -{self.short}, --{self.long}"
        if self.short:
            return f"  -{self.short}"
        return f"      --{self.long}"

    def mark(self, value=None):
        self.provided = True
        self.count += 1
        if value is not None:
            self.value = value


##
## How options are stored.
##
## Twain owns every Option in self.arena, keyed by the Option's id.
## The index maps each *spelling* ("p", "port") to that same Option
## object.  Nothing in the index is a copy; mutating the Option you
## got from "p" changes what you see from "port".
##
## Short and long spellings share one namespace in the index.
## You can't have a short option "v" and a long option "v".
##
## release() removes each key from the index, decrementing the
## Option's reference count; an Option leaves the arena when
## its last key is gone.
##

class Twain:
    """
    A registry of command-line options, and a parser for them.

    Create one, add() your options, parse() a command-line,
    then ask has(), get(), and occurrences() about what you found.
    Every query accepts either spelling of an option.

    Call release() when you're done with it (or use it
    as a context manager).
    """

    def __init__(self,
        name=None,
        *,
        # how many options you expect.  the index starts with
        # three times this many slots.
        size=16,

        # length limits, None means unlimited.
        # short options are always exactly one character.
        long_option_length = 32,
        description_length = 150,

        # text for help output, printed before and after the options.
        description=None,
        footer=None,

        # printed by main() for an INFO option spelled "version".
        version=None,

        # help layout: the column where option descriptions start,
        # and how wide they're wrapped.
        usage_indent_descriptions = 46,
        usage_description_width = 70,

        log_events = True,
        ):
        self.name = name or os.path.basename(sys.argv[0])

        self.long_option_length = long_option_length
        self.description_length = description_length

        self.description = description
        self.footer = footer
        self.version = version

        self.usage_indent_descriptions = usage_indent_descriptions
        self.usage_description_width = usage_description_width

        self.index = index.Index(max(size, 1) * 3)
        self.arena = {}
        self.registrations = 0

        self.positionals = []
        self.remainder = []

        self.released = False

        self.log_events = log_events
        self.log = big.Log()

    def __repr__(self):
        state = " released" if self.released else ""
        return f"<Twain {self.name!r} options={len(self.arena)}{state}>"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()

    def __contains__(self, key):
        return self.index.contains(key)

    def add(self, short=None, long=None, description=None, kind=ValueKind.NONE):
        """
        Registers a new option and returns it.

        "short" is a single character, "long" is a string;
        at least one of the two is required.  Neither includes
        the leading dashes.  "kind" is a ValueKind.

        Raises ConfigurationError if anything's wrong, in which
        case nothing is registered.
        """
        if self.released:
            raise ConfigurationError("can't add options, this Twain object was already released.")

        # empty strings mean "no such spelling".
        short = short or None
        long = long or None

        if not (short or long):
            raise ConfigurationError("You must enter either the short or long option.")
        if description is None:
            raise ConfigurationError(f"You must set the description for option '{long or short}'.")
        if not isinstance(kind, ValueKind):
            raise ConfigurationError(f"option '{long or short}': kind must be a ValueKind, not {kind!r}.")

        if short and (short in self.index):
            raise ConfigurationError(f"You've already set the short option '{short}'.")
        if long and ((long in self.index) or (long == short)):
            raise ConfigurationError(f"You've already set the long option '{long}'.")

        if short and (len(short) > 1):
            raise ConfigurationError("The maximum length of the short option is 1.")
        if long and (self.long_option_length is not None) and (len(long) > self.long_option_length):
            raise ConfigurationError(f"The maximum length of the long option is {self.long_option_length}.")
        if (self.description_length is not None) and (len(description) > self.description_length):
            raise ConfigurationError(f"The maximum length of the description is {self.description_length}.")

        for spelling in (short, long):
            if spelling and spelling.startswith("-"):
                raise ConfigurationError(f"option '{spelling}' must be specified without leading dashes.")
        if long and ("=" in long):
            raise ConfigurationError(f"long option '{long}' can't contain '='.")

        keys = [key for key in (short, long) if key]
        option = None
        try:
            option = Option(short, long, description, kind, str(self.registrations))
            for key in keys:
                self.index.insert(key, option)
                option.references += 1
        except MemoryError as e:
            if option is not None:
                for key in keys:
                    if self.index.lookup(key) is option:
                        self.index.remove(key)
            raise AllocationError(f"Cannot allocate memory for option '{long or short}'.") from e

        self.arena[option.id] = option
        self.registrations += 1

        if self.log_events:
            self.log(f"add {option.label().strip()} ({kind.name})")
        return option

    def options(self):
        """
        Iterates over every registered Option, once each,
        in index order.
        """
        seen = set()
        for key, option in self.index.items():
            if option.id in seen:
                continue
            seen.add(option.id)
            yield option

    def parse(self, args=None):
        """
        Parses a command-line.  args[0] is the program name and is
        skipped.  If args is None, parses sys.argv.

        Options found are updated in place.  Arguments that aren't
        options are appended to self.positionals; anything after
        a "--" argument is appended, unexamined, to self.remainder.

        Raises a subclass of UsageError if the command-line is bad.
        """
        if args is None:
            args = sys.argv
        args = list(args)

        if (not args) or (not len(self.index)):
            return

        if self.log_events:
            self.log.enter(f"parse {shlex.join(args[1:])}")
        try:
            stopped_early = self._parse_arguments(PushbackIterator(args[1:]))
            if not stopped_early:
                self._check_required()
        finally:
            if self.log_events:
                self.log.exit()

    def _parse_arguments(self, iterator):
        # returns True if parsing stopped before the end of the
        # command-line, because of "--" or an INFO option.
        for a in iterator:
            if a == "--":
                self.remainder.extend(iterator)
                if self.log_events:
                    self.log(f"'--', stop parsing, remainder {self.remainder!r}")
                return True

            if a.startswith("--"):
                option = self._parse_long_option(a, iterator)
            elif a.startswith("-") and (len(a) > 1):
                option = self._parse_short_options(a, iterator)
            else:
                self.positionals.append(a)
                continue

            if option is not None:
                if self.log_events:
                    self.log(f"{option.spelling} is INFO, stop parsing")
                return True
        return False

    def _next_value(self, iterator):
        # consumes and returns the next argument if it's usable
        # as a value.  otherwise leaves it alone and returns None.
        for a in iterator:
            if not a.startswith("-"):
                return a
            iterator.push(a)
            break
        return None

    def _parse_long_option(self, a, iterator):
        # returns the option if it's INFO, otherwise None.
        name, equals, value = a[2:].partition("=")

        option = self.index.lookup(name)
        if option is None:
            raise UnknownOption(f"Unknown option: --{name}.\n{help_hint}", name)

        if equals:
            # --name=value
            if not option.kind.takes_value:
                raise UnexpectedValue(f"option '--{name}' doesn't allow an argument.", name)
            if not value:
                raise MissingValue(f"Missing value for option: --{name}=", name)
            option.mark(value)
            if self.log_events:
                self.log(f"--{name}={value}")
            return None

        option.mark()
        if option.kind == ValueKind.INFO:
            return option

        if option.kind.takes_value:
            value = self._next_value(iterator)
            if value is None:
                raise MissingValue(f"Missing value for option: --{name}", name)
            option.value = value
            if self.log_events:
                self.log(f"--{name} {value}")
        elif self.log_events:
            self.log(f"--{name}")
        return None

    def _parse_short_options(self, a, iterator):
        ## "-abc" means "-a -b -c".
        ## If one of them takes a value, whatever follows it in
        ## the same argument is its value: "-p443" means "-p 443".
        ## If nothing follows it, the value is the next argument.
        ##
        ## Returns the option if it's INFO, otherwise None.
        flags = a[1:]
        for i, c in enumerate(flags):
            option = self.index.lookup(c)
            if option is None:
                raise UnknownOption(f"Unknown option '{c}'.\n{help_hint}", c)

            option.mark()
            if option.kind == ValueKind.INFO:
                return option

            if not option.kind.takes_value:
                if self.log_events:
                    self.log(f"-{c}")
                continue

            attached = flags[i + 1:]
            if attached:
                option.value = attached
                if self.log_events:
                    self.log(f"-{c}{attached}")
                break

            value = self._next_value(iterator)
            if value is None:
                raise MissingValue(f"Missing value for option: -{c}", c)
            option.value = value
            if self.log_events:
                self.log(f"-{c} {value}")
        return None

    def _check_required(self):
        for option in self.options():
            if (option.kind == ValueKind.REQUIRED) and (option.value is None):
                raise MissingRequired(f"Missing required option: '{option.spelling}'\n{help_hint}", option.name)

    def lookup(self, key):
        """
        Returns the Option registered under key (either spelling),
        or None.
        """
        return self.index.lookup(key)

    def has(self, key):
        option = self.index.lookup(key)
        return bool(option and option.provided)

    def get(self, key):
        """
        Returns the value of the option, or None if the option
        wasn't provided.  Note that an option provided without
        a value also returns None; use has() to tell them apart.
        """
        option = self.index.lookup(key)
        if option and option.provided:
            return option.value
        return None

    def occurrences(self, key):
        option = self.index.lookup(key)
        if option and option.provided:
            return option.count
        return 0

    def release(self):
        """
        Removes every option and destroys the index.
        Safe to call more than once.
        """
        if self.released:
            return

        for key, option in self.index.items():
            self.index.remove(key)
            option.references -= 1
            if not option.references:
                del self.arena[option.id]

        assert not self.arena, f"options still referenced after release: {list(self.arena.values())}"
        self.index.destroy()
        self.released = True

        if self.log_events:
            self.log("release")

    def usage(self, description=None, footer=None):
        """
        Renders the help text and returns it as a string.
        Returns an empty string if no options are registered.
        """
        if not len(self.index):
            return ""

        if description is None:
            description = self.description
        if footer is None:
            footer = self.footer

        indent = self.usage_indent_descriptions
        width = self.usage_description_width

        lines = []
        if description:
            lines.append(description)
        lines.append("Options:")

        for option in self.options():
            wrapped = text.wrap_words(text.split_words(option.description), width)
            lines.append(text.merge_columns(
                (option.label(), indent, indent),
                (wrapped, 0, width + 1),
                column_spacing=0,
                ))

        if footer:
            lines.append("")
            lines.append(footer)

        return "\n".join(lines)

    def help(self, description=None, footer=None):
        """
        Prints the help text, releases everything, and exits
        with status 0.  Does nothing if no options are registered.
        """
        if not len(self.index):
            return
        print(self.usage(description, footer))
        self.release()
        sys.exit(0)

    def main(self, args=None):
        """
        Parses a command-line the way a program's main() would.

        If parsing fails, prints the error to stderr, releases
        everything, and exits with status 1.

        If an INFO option was given, handles it and exits with
        status 0: "help" prints the help text, "version" prints
        the version, any other INFO option prints its description.

        Otherwise returns self.
        """
        try:
            self.parse(args)
        except UsageError as e:
            print(f"{self.name}: {e}", file=sys.stderr)
            self.release()
            sys.exit(1)

        for option in self.options():
            if (option.kind == ValueKind.INFO) and option.provided:
                break
        else:
            return self

        if (option.long == "help") or (option.short == "h"):
            self.help()
        if option.long == "version":
            print(self.version or option.description)
        else:
            print(option.description)
        self.release()
        sys.exit(0)
