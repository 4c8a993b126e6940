# Copyright 2016, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.

"""Composition of expression parsers out of independent precedence levels.

A recursive descent expression grammar is usually written as a chain of rules, each
calling the next tighter-binding one:

    expr   = term ("+" term)*
    term   = factor ("*" factor)*
    factor = number | "(" expr ")"

Here each level is instead a *level creator*: a function `(top, next) -> Parser`, where
`top` is the finished parser for the whole grammar and `next` is the parser for all the
levels after this one. `levels` wires a list of creators together, so operators can be
reordered or added by editing a list:

    levelsWithDefault([
        leftAssociativeNextLevel(op("+"), Addition),
        leftAssociativeNextLevel(op("*"), Multiplication),
        orNext(number),
        lambda top, next: (keyword("(") >> top << keyword(")")) | next,
    ])
"""

from functools import reduce
import logging

import levels.combinators as ct

logger = logging.getLogger(__name__)

BOTTOM_MESSAGE = "Bottom parser reached. No viable alternative"


def levels(bottom, creators):
    """Returns a parser that connects the parsers of individual levels.

    Creators are folded from the last to the first. The last creator receives `bottom` as
    its `next` parser; every other creator receives the parser built by the creator after
    it. Each creator receives the same `top`, which refers to the finished parser, so
    levels may reenter the grammar (for example, inside parentheses). `top` must not be
    called while the levels are being composed.

    Args:
        bottom: a parser used when every level fails. Its failure is the final
            diagnostic of the grammar.
        creators: a sequence of level creators, loosest binding first.

    Returns:
        A parser for the whole grammar. It is reusable and holds no state between parses.
    """
    top = ct.Forward()
    parser = bottom
    for creator in reversed(creators):
        parser = creator(top, parser)
        assert isinstance(parser, ct.Parser), "level creator did not return a parser"
    top.define(parser)
    logger.debug("composed %d levels", len(creators))
    return parser


def levelsWithDefault(creators):
    """Returns a levels parser whose bottom parser fails with a fixed message."""
    return levels(ct.Fail(BOTTOM_MESSAGE), creators)


def leftAssociativeNextLevel(op, combine):
    """Returns a level creator for a left associative operator.

    The level parses the next level, then repeatedly parses `op` followed by the next
    level. Each operand is combined with the previous result: `a op b op c` produces
    `combine(combine(a, b), c)`. A single operand is returned unchanged.

    Args:
        op: a parser for the operator. Its value is ignored.
        combine: a function `(A, A) -> A` which combines two operands.
    """
    def creator(top, next):
        return ct.LeftRec(next, op >> next, lambda left, right, _: combine(left, right))
    return creator


def rightAssociativeNextLevel(op, combine):
    """Returns a level creator for a right associative operator.

    `a op b op c` produces `combine(a, combine(b, c))`. A single operand is returned
    unchanged.

    Args:
        op: a parser for the operator. Its value is ignored.
        combine: a function `(A, A) -> A` which combines two operands.
    """
    def creator(top, next):
        return ct.Rep1Sep(next, op) ^ (lambda operands, _: reduceRight(combine, operands))
    return creator


def reduceRight(combine, operands):
    """Combines a non-empty list of operands, starting from the last pair.

    Operands are collected into a list by the parser and reduced afterward, since folding
    while parsing would need a seed value for the last operand. There is no seed here
    either, so an empty list raises TypeError.
    """
    return reduce(lambda right, left: combine(left, right), reversed(operands))


def orNext(parser):
    """Returns a level creator that falls through to the next level when `parser` fails."""
    def creator(top, next):
        return parser | next
    return creator


__all__ = [
    "BOTTOM_MESSAGE",
    "levels",
    "levelsWithDefault",
    "leftAssociativeNextLevel",
    "rightAssociativeNextLevel",
    "orNext",
]
