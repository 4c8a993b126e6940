# Copyright 2014, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


import unittest

from levels.combinators import *
from levels.lexer import lexPrintable
from levels.tok import *

integer = Tag(INTEGER)
plus = Reserved(OPERATOR, "+")


def makeReader(text):
    filename = "test"
    return Reader(filename, lexPrintable(filename, text))


class TestCombinators(unittest.TestCase):
    def checkParse(self, expected, parser, text):
        reader = makeReader(text)
        result = parser(reader)
        self.assertTrue(result)
        value = result.value
        self.assertEqual(expected, value)

    def testReserved(self):
        parser = Reserved(RESERVED, "(")
        self.checkParse("(", parser, "(")

    def testReservedEmpty(self):
        parser = Reserved(RESERVED, "(")
        reader = makeReader("")
        self.assertTrue(reader.isEmpty())
        result = parser(reader)
        self.assertFalse(result)
        self.assertEqual("unexpected end of file", result.message)

    def testReservedWrongText(self):
        parser = Reserved(RESERVED, "(")
        result = parser(makeReader(")"))
        self.assertFalse(result)
        self.assertEqual("expected ( but found )", result.message)

    def testTag(self):
        parser = integer
        self.checkParse("123", parser, "123")

    def testFail(self):
        parser = Fail("nothing here")
        result = parser(makeReader("1"))
        self.assertFalse(result)
        self.assertEqual("nothing here", result.message)

    def testPhrase(self):
        parser = Phrase(integer)
        reader = makeReader("1 2")
        result = parser(reader)
        self.assertFalse(result)
        self.assertEqual("found garbage at end of file", result.message)
        self.assertEqual(3, result.location.beginColumn)

    def testProcess(self):
        parser = integer ^ (lambda p, loc: len(p))
        self.checkParse(3, parser, "123")

    def testConcat(self):
        parser = integer + integer
        self.checkParse(("1", "2"), parser, "1 2")

    def testConcatLocation(self):
        parser = integer + integer
        result = parser(makeReader("12 345"))
        self.assertEqual(1, result.location.beginColumn)
        self.assertEqual(7, result.location.endColumn)

    def testKeepRight(self):
        parser = Reserved(RESERVED, "(") >> integer
        self.checkParse("1", parser, "(1")

    def testKeepLeft(self):
        parser = integer << Reserved(RESERVED, ")")
        self.checkParse("1", parser, "1)")

    def testAlternate(self):
        parser = integer | Reserved(RESERVED, "(")
        self.checkParse("12", parser, "12")
        self.checkParse("(", parser, "(")

    def testAlternateBacktracks(self):
        parser = (integer + integer) | integer
        self.checkParse("1", parser, "1 (")

    def testRepEmpty(self):
        parser = Rep(integer)
        self.checkParse([], parser, "(")

    def testRep(self):
        parser = Rep(integer)
        self.checkParse(["1", "2", "3"], parser, "1 2 3")

    def testRep1SepOne(self):
        parser = Rep1Sep(integer, plus)
        self.checkParse(["1"], parser, "1")

    def testRep1SepMany(self):
        parser = Rep1Sep(integer, plus)
        self.checkParse(["1", "2", "3"], parser, "1+2+3")

    def testRep1SepTrailingSeparator(self):
        parser = Rep1Sep(integer, plus)
        result = parser(makeReader("1+2+"))
        self.assertEqual(["1", "2"], result.value)
        self.assertEqual(3, result.next.pos)

    def testLeftRec(self):
        def combine(left, right, loc):
            return left + right
        parser = LeftRec(integer, plus >> integer, combine)
        self.checkParse("123", parser, "1+2+3")

    def testLeftRecSingle(self):
        calls = []
        def combine(left, right, loc):
            calls.append((left, right))
            return left + right
        parser = LeftRec(integer, plus >> integer, combine)
        self.checkParse("1", parser, "1")
        self.assertEqual([], calls)

    def testLeftRecLocation(self):
        parser = LeftRec(integer, plus >> integer, lambda l, r, _: l + r)
        result = parser(makeReader("1+2+3"))
        self.assertEqual(1, result.location.beginColumn)
        self.assertEqual(6, result.location.endColumn)

    def testForward(self):
        parser = Forward()
        self.assertFalse(parser.isDefined())
        parser.define(integer)
        self.assertTrue(parser.isDefined())
        self.checkParse("1", parser, "1")

    def testForwardRecursive(self):
        group = Forward()
        group.define((Reserved(RESERVED, "(") >> group << Reserved(RESERVED, ")")) | integer)
        self.checkParse("7", group, "((7))")

    def testForwardDefineTwice(self):
        parser = Forward()
        parser.define(integer)
        self.assertRaises(AssertionError, parser.define, integer)

    def testForwardUndefined(self):
        parser = Forward()
        self.assertRaises(AssertionError, parser, makeReader("1"))


if __name__ == "__main__":
    unittest.main()
