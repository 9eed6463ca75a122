# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

from . import latent_function_inference
from . import optimization
