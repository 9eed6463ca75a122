# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import numpy as np
from ..core.mapping import Mapping
from paramz import Param

class Constant(Mapping):
    """
    A constant mapping.

    .. math::

       F(\\mathbf{x}) = c

    :param input_dim: dimension of input.
    :type input_dim: int
    :param: value the value of this constant mapping

    Fitting sets c to the mean of the outputs.
    """

    def __init__(self, input_dim, value=0., name='constmap'):
        super(Constant, self).__init__(input_dim=input_dim, name=name)
        value = np.atleast_1d(value)
        if not value.size == 1:
            raise ValueError("bad constant value: pass a float")
        self.C = Param('C', value.astype(np.float64))
        self.link_parameter(self.C)

    def f(self, X):
        return np.full(X.shape[0], self.C.values[0])

    def fit(self, X, Y):
        self.C[:] = np.mean(Y)
