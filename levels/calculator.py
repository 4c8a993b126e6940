# Copyright 2016, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


import argparse
import logging
import sys

from levels.arithmetic import loadLevelTable, parseText
from levels.errors import LevelsException
from levels.evaluator import evaluate

logger = logging.getLogger(__name__)


def main(argv=None):
    cmdline = argparse.ArgumentParser(description="Parse and evaluate arithmetic expressions")
    cmdline.add_argument("expressions", metavar="expression", type=str, nargs="*",
                         help="Expressions to parse. If none are given, one expression " +
                              "is read from each line of standard input.")
    cmdline.add_argument("--eval", action="store_true",
                         help="Print the value of each expression instead of its tree")
    cmdline.add_argument("--levels", action="store", type=str, default=None,
                         help="YAML file with the operator levels to use")
    cmdline.add_argument("--verbose", action="store_true",
                         help="Log debugging information")
    args = cmdline.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(message)s")

    try:
        table = loadLevelTable(args.levels) if args.levels is not None else None
    except LevelsException as e:
        sys.stderr.write("%s\n" % e)
        return 1

    if args.expressions:
        sources = [("<arg%d>" % i, text) for i, text in enumerate(args.expressions)]
    else:
        sources = [("<line%d>" % (i + 1), line)
                   for i, line in enumerate(sys.stdin) if line.strip()]

    status = 0
    for filename, text in sources:
        logger.debug("parsing %s", filename)
        try:
            expr = parseText(filename, text.strip(), table)
            if args.eval:
                sys.stdout.write("%d\n" % evaluate(expr))
            else:
                sys.stdout.write(str(expr))
        except LevelsException as e:
            sys.stderr.write("%s\n" % e)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
