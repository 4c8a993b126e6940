# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


import unittest

from levels.lexer import *
from levels.errors import LexException
from levels.location import Location
from levels.tok import *

class TestLexer(unittest.TestCase):
    def checkTags(self, expected, text):
        tokens = lex("test", text)
        tags = [t.tag for t in tokens]
        self.assertEqual(expected, tags)

    def checkText(self, expected, text):
        tokens = lex("test", text)
        texts = [t.text for t in tokens]
        self.assertEqual(expected, texts)

    def checkTag(self, expected, text):
        tokens = lex("test", text)
        tags = [t.tag for t in tokens]
        self.assertEqual(expected, tags[0])

    def testEmpty(self):
        self.checkTags([], "")

    def testBasic(self):
        text = "1 + 23"
        self.checkTags([INTEGER, SPACE, OPERATOR, SPACE, INTEGER], text)
        self.checkText(["1", " ", "+", " ", "23"], text)

    def testOperators(self):
        for op in ["+", "-", "*", "/", "^", "**"]:
            self.checkTag(OPERATOR, op)

    def testOperatorNotSign(self):
        self.checkText(["1", "-", "2"], "1-2")

    def testParentheses(self):
        self.checkTags([RESERVED, INTEGER, RESERVED], "(1)")

    def testNewline(self):
        tokens = lex("test", "1\n  2")
        self.assertEqual(Location("test", 2, 3, 2, 4), tokens[-1].location)

    def testLocation(self):
        tokens = lex("test", "12 ^ 3")
        self.assertEqual(Location("test", 1, 1, 1, 3), tokens[0].location)
        self.assertEqual(Location("test", 1, 4, 1, 5), tokens[2].location)

    def testPrintable(self):
        tokens = lexPrintable("test", " 1 *\t2\n")
        self.assertEqual(["1", "*", "2"], [t.text for t in tokens])

    def testIllegalCharacter(self):
        with self.assertRaises(LexException) as context:
            lex("test", "1 + x")
        self.assertEqual(Location("test", 1, 5, 1, 6), context.exception.location)
        self.assertEqual("test:1.5-1.6: lexical error: illegal character: x",
                         str(context.exception))


if __name__ == "__main__":
    unittest.main()
