# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

from . import util
from . import kern
from . import mappings
from . import inference
from . import core
from . import models
from . import testing

from .core import GP
from .__version__ import __version__
