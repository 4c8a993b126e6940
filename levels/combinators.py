# Copyright 2014, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


from levels.location import Location


class Reader(object):
    def __init__(self, filename, tokens, pos=0):
        self.filename = filename
        self.tokens = tokens
        self.pos = pos

    def isEmpty(self):
        return self.pos == len(self.tokens)

    def token(self):
        assert not self.isEmpty()
        return self.tokens[self.pos]

    def location(self):
        if not self.isEmpty():
            return self.tokens[self.pos].location
        elif len(self.tokens) > 0:
            return self.tokens[-1].location
        else:
            return Location(self.filename, 1, 1, 1, 1)

    def next(self):
        assert not self.isEmpty()
        return Reader(self.filename, self.tokens, self.pos + 1)


class ParseResult(object):
    def __init__(self, location):
        self.location = location


class Success(ParseResult):
    def __init__(self, location, value, next):
        super(Success, self).__init__(location)
        self.value = value
        self.next = next

    def __bool__(self):
        return True

    def __repr__(self):
        return "Success(%s, %s, %s)" % \
          (repr(self.location), repr(self.value), repr(self.next.pos))


class Failure(ParseResult):
    def __init__(self, location, message):
        super(Failure, self).__init__(location)
        self.message = message

    def __bool__(self):
        return False

    def __repr__(self):
        return "Failure(%s, %s)" % (self.location, self.message)


class Parser(object):
    def __xor__(self, other):
        return Process(self, other)

    def __add__(self, other):
        return Concatenate(self, other)

    def __or__(self, other):
        return Alternate(self, other)

    def __rshift__(self, other):
        return Concatenate(self, other) ^ (lambda parsed, _: parsed[1])

    def __lshift__(self, other):
        return Concatenate(self, other) ^ (lambda parsed, _: parsed[0])


class Reserved(Parser):
    def __init__(self, tag, text):
        self.tag = tag
        self.text = text

    def __call__(self, reader):
        if reader.isEmpty():
            return Failure(reader.location(), "unexpected end of file")
        token = reader.token()
        if token.tag != self.tag or token.text != self.text:
            return Failure(token.location, "expected %s but found %s" % (self.text, token.text))
        else:
            return Success(token.location, token.text, reader.next())


class Tag(Parser):
    def __init__(self, tag):
        self.tag = tag

    def __call__(self, reader):
        if reader.isEmpty():
            return Failure(reader.location(), "unexpected end of file")
        token = reader.token()
        if token.tag != self.tag:
            return Failure(token.location, "expected %s but found %s" % (self.tag, token.tag))
        else:
            return Success(token.location, token.text, reader.next())


class Fail(Parser):
    """Never matches. Used as the innermost fallback of a grammar."""

    def __init__(self, message):
        self.message = message

    def __call__(self, reader):
        return Failure(reader.location(), self.message)


class Forward(Parser):
    """A parser which is referenced before it exists.

    Grammars that refer to themselves can be built against a Forward, which is then
    defined with the finished parser. A Forward must be defined exactly once, and
    before it is first called.
    """

    def __init__(self):
        self.parser = None

    def isDefined(self):
        return self.parser is not None

    def define(self, parser):
        assert isinstance(parser, Parser)
        assert not self.isDefined(), "forward parser is already defined"
        self.parser = parser

    def __call__(self, reader):
        assert self.isDefined(), "forward parser called before it was defined"
        return self.parser(reader)


class Phrase(Parser):
    def __init__(self, parser):
        assert isinstance(parser, Parser)
        self.parser = parser

    def __call__(self, reader):
        result = self.parser(reader)
        if result and not result.next.isEmpty():
            return Failure(result.next.location(), "found garbage at end of file")
        return result


class Process(Parser):
    def __init__(self, parser, process):
        assert isinstance(parser, Parser)
        self.parser = parser
        self.process = process

    def __call__(self, reader):
        result = self.parser(reader)
        if not result:
            return result
        value = self.process(result.value, result.location)
        return Success(result.location, value, result.next)


class Concatenate(Parser):
    def __init__(self, left, right):
        assert isinstance(left, Parser) and isinstance(right, Parser)
        self.left = left
        self.right = right

    def __call__(self, reader):
        left_result = self.left(reader)
        if not left_result:
            return left_result
        right_result = self.right(left_result.next)
        if not right_result:
            return right_result
        return Success(left_result.location.combine(right_result.location),
                       (left_result.value, right_result.value),
                       right_result.next)


class Alternate(Parser):
    def __init__(self, left, right):
        assert isinstance(left, Parser) and isinstance(right, Parser)
        self.left = left
        self.right = right

    def __call__(self, reader):
        result = self.left(reader)
        if result:
            return result
        return self.right(reader)


class Rep(Parser):
    def __init__(self, parser):
        assert isinstance(parser, Parser)
        self.parser = parser

    def __call__(self, reader):
        elements = []
        location = reader.location()
        next = reader
        result = self.parser(next)
        while result:
            elements.append(result.value)
            location = location.combine(result.location)
            next = result.next
            result = self.parser(next)
        return Success(location, elements, next)


def Rep1Sep(parser, separator):
    def process(parsed, _):
        (l, r) = parsed
        return [l] + r
    return parser + Rep(separator >> parser) ^ process


class LeftRec(Parser):
    """Parses `left`, then folds each following `next` into the result with `combine`.

    `combine` is called as `combine(value, nextValue, location)`.
    """

    def __init__(self, left, next, combine):
        assert isinstance(left, Parser) and isinstance(next, Parser)
        self.left = left
        self.next = next
        self.combine = combine

    def __call__(self, reader):
        result = self.left(reader)
        if not result:
            return result

        while True:
            nextResult = self.next(result.next)
            if not nextResult:
                break

            location = result.location.combine(nextResult.location)
            nextValue = self.combine(result.value, nextResult.value, location)
            result = Success(location, nextValue, nextResult.next)
        return result


__all__ = [
    "Reader",
    "ParseResult",
    "Success",
    "Failure",
    "Parser",
    "Reserved",
    "Tag",
    "Fail",
    "Forward",
    "Phrase",
    "Process",
    "Concatenate",
    "Alternate",
    "Rep",
    "Rep1Sep",
    "LeftRec",
]
