# Copyright 2014, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


import re

from levels.errors import LexException
from levels.location import Location
from levels.tok import *

__expressions = [
  (r"\r?\n", NEWLINE),
  (r"[\t ]+", SPACE),

  (r"\(",  RESERVED),
  (r"\)",  RESERVED),

  (r"[0-9]+", INTEGER),

  (r"[+\-*/^]+", OPERATOR),
]
__expressions = [(re.compile(expr[0]), expr[1]) for expr in __expressions]


def lex(filename, source):
    tokens = []
    pos = 0
    end = len(source)
    line = 1
    column = 1
    while pos < end:
        token = None
        for rx, tag in __expressions:
            m = rx.match(source, pos)
            if m:
                text = m.group(0)
                if token and len(text) <= len(token.text):
                    continue

                location = Location(filename, line, column, line, column + len(text))
                token = Token(text, tag, location)
        if not token:
            location = Location(filename, line, column, line, column + 1)
            raise LexException(location, "illegal character: %s" % source[pos:pos+1])
        tokens.append(token)
        if token.tag == NEWLINE:
            line += 1
            column = 1
        else:
            column += len(token.text)
        pos += len(token.text)

    return tokens


def lexPrintable(filename, source):
    return [token for token in lex(filename, source) if token.isPrintable()]

__all__ = ["lex", "lexPrintable"]
