# Copyright 2014, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


class LevelsException(Exception):
    def __init__(self, location, message):
        super(LevelsException, self).__init__(location, message)
        self.location = location
        self.message = message

    def __str__(self):
        locStr = str(self.location) if self.location is not None else "<unknown>"
        return "%s: %s error: %s" % (locStr, self.kind, self.message)


class LexException(LevelsException):
    kind = "lexical"


class ParseException(LevelsException):
    kind = "syntax"


class ConfigException(LevelsException):
    kind = "configuration"


class EvaluationException(LevelsException):
    kind = "evaluation"
