# Copyright 2014, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


from levels.data import Data


RESERVED = "reserved"
OPERATOR = "operator"
INTEGER = "integer"

NEWLINE = "newline"
SPACE = "space"


class Token(Data):
    propertyNames = ["text", "tag", "location"]

    def __str__(self):
        return '("%s", %s) @ %s' % (self.text, self.tag, str(self.location))

    def isPrintable(self):
        return self.tag not in [NEWLINE, SPACE]


__all__ = ["RESERVED", "OPERATOR", "INTEGER", "NEWLINE", "SPACE", "Token"]
