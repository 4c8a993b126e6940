# Copyright 2016, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.

"""An arithmetic expression grammar built from levels.

The binary operator levels come from a level table, which is loaded from YAML. The
default table is arithmetic.yaml, next to this file. Integer literals and parenthesized
expressions always bind tighter than any operator in the table.
"""

import logging
import os.path

import yaml

from levels import ast
import levels.combinators as ct
from levels.composition import (
    leftAssociativeNextLevel,
    levelsWithDefault,
    orNext,
    rightAssociativeNextLevel,
)
from levels.data import Data
from levels.errors import ConfigException, LexException, ParseException
from levels.lexer import lexPrintable
from levels.location import Location
from levels.tok import *

logger = logging.getLogger(__name__)

LEFT_ASSOC = "left"
RIGHT_ASSOC = "right"


class OperatorLevel(Data):
    propertyNames = ["operator", "node", "associativity"]


# Main functions
def parse(filename, tokens, table=None):
    reader = ct.Reader(filename, tokens)
    parser = ct.Phrase(expression(table))
    try:
        result = parser(reader)
    except RecursionError:
        # Each parenthesis reenters the grammar through every level on the Python stack.
        raise ParseException(reader.location(), "expression is nested too deeply")
    if not result:
        raise ParseException(result.location, result.message)
    return result.value


def parseText(filename, text, table=None):
    return parse(filename, lexPrintable(filename, text), table)


# Grammar
def expression(table=None):
    if table is None:
        table = getDefaultLevelTable()
    creators = [operatorLevel(level) for level in table]
    creators.append(orNext(integer))
    creators.append(groupLevel)
    return levelsWithDefault(creators)


def operatorLevel(level):
    nodeClass = level.node
    def combine(left, right):
        return nodeClass(left, right, left.location.combine(right.location))
    if level.associativity == LEFT_ASSOC:
        return leftAssociativeNextLevel(operator(level.operator), combine)
    else:
        return rightAssociativeNextLevel(operator(level.operator), combine)


def groupLevel(top, next):
    return (keyword("(") >> top << keyword(")")) | next


# Basic parsers
def keyword(kw):
    return ct.Reserved(RESERVED, kw)

def operator(op):
    return ct.Reserved(OPERATOR, op)

integer = ct.Tag(INTEGER) ^ (lambda text, loc: ast.Number(int(text), loc))


# Level tables
def loadLevelTable(path):
    """Loads a table of operator levels from a YAML file.

    The file contains a `levels` list. Each item has an `operator` symbol, the name of the
    AST `node` class built for it, and its `associativity` ("left" or "right"). Items are
    listed loosest binding first.

    Returns:
        A list of OperatorLevel.

    Raises:
        ConfigException: if the file can't be read or doesn't describe a valid table.
    """
    fileLoc = Location(path, 1, 1, 1, 1)
    try:
        with open(path) as tableFile:
            document = yaml.safe_load(tableFile)
    except OSError as e:
        raise ConfigException(fileLoc, "could not read level table: %s" % e.strerror)
    except yaml.YAMLError as e:
        raise ConfigException(fileLoc, "invalid YAML: %s" % e)
    table = buildLevelTable(fileLoc, document)
    logger.debug("loaded %d operator levels from %s", len(table), path)
    return table


def buildLevelTable(location, document):
    if not isinstance(document, dict) or not isinstance(document.get("levels"), list):
        raise ConfigException(location, "level table must have a 'levels' list")

    table = []
    seen = set()
    for index, item in enumerate(document["levels"]):
        if not isinstance(item, dict):
            raise ConfigException(location, "level %d is not a mapping" % index)
        op = item.get("operator")
        nodeName = item.get("node")
        associativity = item.get("associativity", LEFT_ASSOC)

        if not isinstance(op, str) or not isOperatorSymbol(op):
            raise ConfigException(location, "level %d: invalid operator: %r" % (index, op))
        if op in seen:
            raise ConfigException(location, "operator %s appears in more than one level" % op)
        seen.add(op)
        if nodeName not in ast.BINARY_EXPRESSION_CLASSES:
            raise ConfigException(location, "level %d: unknown node: %r" % (index, nodeName))
        if associativity not in (LEFT_ASSOC, RIGHT_ASSOC):
            raise ConfigException(location,
                                  "level %d: associativity must be '%s' or '%s'" %
                                  (index, LEFT_ASSOC, RIGHT_ASSOC))

        table.append(OperatorLevel(op, ast.BINARY_EXPRESSION_CLASSES[nodeName], associativity))
    return table


def isOperatorSymbol(text):
    try:
        tokens = lexPrintable("<operator>", text)
    except LexException:
        return False
    return len(tokens) == 1 and tokens[0].tag == OPERATOR


def getDefaultLevelTable():
    _initialize()
    return list(_defaultLevelTable)


_defaultLevelTable = []

_initialized = False

def _initialize():
    global _initialized
    if _initialized:
        return
    tablePath = os.path.join(os.path.dirname(__file__), "arithmetic.yaml")
    _defaultLevelTable.extend(loadLevelTable(tablePath))
    _initialized = True


__all__ = [
    "LEFT_ASSOC",
    "RIGHT_ASSOC",
    "OperatorLevel",
    "parse",
    "parseText",
    "expression",
    "loadLevelTable",
    "buildLevelTable",
    "getDefaultLevelTable",
]
