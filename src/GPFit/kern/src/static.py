# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)


from .kern import Kern
import numpy as np
from paramz import Param
from paramz.transformations import Logexp


class Bias(Kern):
    """
    Constant covariance between all pairs of inputs

    .. math::

       k(x,y) = \\sigma^2

    """
    is_scalable = True

    def __init__(self, input_dim, variance=1., name='bias'):
        super(Bias, self).__init__(input_dim, name)
        self.variance = Param('variance', variance, Logexp())
        self.link_parameters(self.variance)

    def K(self, X, X2=None):
        shape = (X.shape[0], X.shape[0] if X2 is None else X2.shape[0])
        return np.full(shape, self.variance.values[0])

    def Kdiag(self, X):
        ret = np.empty((X.shape[0],), dtype=np.float64)
        ret[:] = self.variance.values
        return ret

    def derivative_matrices(self, X):
        return [np.ones((X.shape[0], X.shape[0]))]

    def rescale(self, scale):
        self.variance[:] = self.variance.values*scale
