# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import numpy as np
from ..core.mapping import Mapping

class Zero(Mapping):
    """
    The zero mapping, the usual prior mean of a GP.

    .. math::

       F(\\mathbf{x}) = 0

    """
    def __init__(self, input_dim, name='zeromap'):
        super(Zero, self).__init__(input_dim=input_dim, name=name)

    def f(self, X):
        return np.zeros(X.shape[0])
