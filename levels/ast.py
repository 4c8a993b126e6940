# Copyright 2014-2016, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


import io


class Node(object):
    def __init__(self, location):
        self.location = location

    def __str__(self):
        buf = io.StringIO()
        printer = Printer(buf)
        printer.write(self)
        return buf.getvalue()

    def tag(self):
        return self.__class__.__name__

    def __eq__(self, other):
        # Locations are ignored. Subtrees are compared with a worklist, since left-nested
        # sums can be much deeper than the recursion limit.
        pairs = [(self, other)]
        while pairs:
            node, other = pairs.pop()
            if not isinstance(other, node.__class__):
                return False
            for k, v in node.__dict__.items():
                if k == "location":
                    continue
                if isinstance(v, Node):
                    pairs.append((v, other.__dict__[k]))
                elif v != other.__dict__[k]:
                    return False
        return True

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        # Consistent with __eq__: equal nodes have the same class and data.
        return hash((self.__class__, self.data()))

    def data(self):
        return ""

    def children(self):
        return []


class Expression(Node):
    pass


class Number(Expression):
    def __init__(self, value, location):
        super(Number, self).__init__(location)
        self.value = value

    def __repr__(self):
        return "Number(%d)" % self.value

    def data(self):
        return str(self.value)


class BinaryExpression(Expression):
    operator = None

    def __init__(self, left, right, location):
        super(BinaryExpression, self).__init__(location)
        self.left = left
        self.right = right

    def __repr__(self):
        return "%s(%s, %s)" % (self.tag(), repr(self.left), repr(self.right))

    def data(self):
        return self.operator

    def children(self):
        return [self.left, self.right]


class Addition(BinaryExpression):
    operator = "+"


class Subtraction(BinaryExpression):
    operator = "-"


class Multiplication(BinaryExpression):
    operator = "*"


class Division(BinaryExpression):
    operator = "/"


class Exponentiation(BinaryExpression):
    operator = "^"


BINARY_EXPRESSION_CLASSES = {
    cls.__name__: cls
    for cls in (Addition, Subtraction, Multiplication, Division, Exponentiation)
}


class NodeVisitor(object):
    """Computes a value for each node in a tree, children first.

    Each node is dispatched by class name to a method like `visitAddition`, or to
    `visitDefault` if there is no such method. The method receives the node followed by
    the values already computed for its children. The tree is walked with an explicit
    stack, so deeply nested expressions don't exhaust the interpreter's recursion limit.
    """

    def visit(self, node):
        values = []
        stack = [(node, False)]
        while stack:
            node, expanded = stack.pop()
            children = node.children()
            if expanded or not children:
                split = len(values) - len(children)
                childValues = values[split:]
                del values[split:]
                values.append(self.dispatch(node, childValues))
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(children))
        return values[0]

    def dispatch(self, node, childValues):
        methodName = self.getMethodName(node.__class__.__name__)
        if hasattr(self, methodName):
            return getattr(self, methodName)(node, *childValues)
        else:
            return self.visitDefault(node, *childValues)

    def getMethodName(self, className):
        return "visit" + className

    def visitDefault(self, node, *childValues):
        raise NotImplementedError


class Printer(object):
    def __init__(self, out):
        self.out = out

    def write(self, node):
        stack = [(node, 0)]
        while stack:
            node, indentLevel = stack.pop()
            data = node.data()
            self.out.write("%s%s%s\n" % ("  " * indentLevel, node.tag(), " " + data if data else ""))
            stack.extend((child, indentLevel + 1) for child in reversed(node.children()))


__all__ = [
    "Node",
    "Expression",
    "Number",
    "BinaryExpression",
    "Addition",
    "Subtraction",
    "Multiplication",
    "Division",
    "Exponentiation",
    "BINARY_EXPRESSION_CLASSES",
    "NodeVisitor",
    "Printer",
]
