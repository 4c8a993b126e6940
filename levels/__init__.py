# Copyright 2016, Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.

"""Expression parsers assembled from precedence levels."""

from levels.composition import (
    BOTTOM_MESSAGE,
    leftAssociativeNextLevel,
    levels,
    levelsWithDefault,
    orNext,
    rightAssociativeNextLevel,
)
