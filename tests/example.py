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

import os
import sys

twain_root = os.environ.get("TWAIN_ROOT")
if twain_root:
    sys.path.insert(0, twain_root)

import twain


app = twain.Twain(
    size=6,
    description="CustomTool 1.0, a powerful utility for advanced system operations.\nBasic usages:\nconnect to a server:  tool [options] hostname port [port] ...\nmonitor incoming traffic:    tool -m -p port [options] [hostname] [port] ...\nsend data to remote server:   tool -S hostname:port -p port [options]\n\nArguments for long options apply equally to their short options.\n",
    footer="Specify custom timeouts using '-t' or '--timeout'. Example: '30' for 30 seconds.",
    version="v1.0.0",
    )

app.add("h", "help", "Displays help information about the available options and usage.", twain.INFO)
app.add(None, "version", "Displays the version number of the program.", twain.INFO)
app.add(None, "port", "Specifies the port number to listen on.", twain.REQUIRED)
app.add("f", "file", "Path to the input file.", twain.OPTIONAL)
app.add("s", "say-hello", "Say hello.", twain.NONE)
app.add("v", "verbose", "Increase verbosity level.", twain.NONE)

# exits on --help, --version, or a bad command-line
app.main()

print(f"Port: {app.get('port')}")

if app.has("file"):
    print(f"File: {app.get('file')}")

if app.has("say-hello"):
    print("Hello :)")

verbosity = app.occurrences("v")

if verbosity == 0:
    print("No verbosity: Minimal output")
elif verbosity == 1:
    print("Verbose level 1: Basic information")
elif verbosity == 2:
    print("Verbose level 2: Detailed information")
else:
    print("Verbose level 3: Debugging information")

app.release()
