# Copyright 2016, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


from levels.ast import NodeVisitor
from levels.errors import EvaluationException


def evaluate(expr):
    """Computes the value of an arithmetic expression.

    Division rounds toward negative infinity, like Python's `//`.
    """
    return EvaluateVisitor().visit(expr)


class EvaluateVisitor(NodeVisitor):
    def visitNumber(self, node):
        return node.value

    def visitAddition(self, node, left, right):
        return left + right

    def visitSubtraction(self, node, left, right):
        return left - right

    def visitMultiplication(self, node, left, right):
        return left * right

    def visitDivision(self, node, left, right):
        if right == 0:
            raise EvaluationException(node.location, "division by zero")
        return left // right

    def visitExponentiation(self, node, base, exponent):
        if exponent < 0:
            if base == 0:
                raise EvaluationException(node.location, "division by zero")
            return 1 // base ** -exponent
        return base ** exponent


__all__ = ["evaluate"]
