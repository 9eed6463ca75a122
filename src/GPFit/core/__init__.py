# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

from paramz import Param, Parameterized

from .gp import GP
from .mapping import *
