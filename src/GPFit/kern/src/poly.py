# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import numpy as np
from .kern import Kern
from paramz import Param
from paramz.transformations import Logexp

class Poly(Kern):
    """
    Polynomial kernel

    .. math::

       k(x,y) = \\sigma^2 (s \\, x^\\top y + b)^{order}

    The order is fixed, variance, scale and bias are parameters (in this order).
    """
    is_scalable = True

    def __init__(self, input_dim, variance=1., scale=1., bias=1., order=3., name='poly'):
        super(Poly, self).__init__(input_dim, name)
        self.variance = Param('variance', variance, Logexp())
        self.scale = Param('scale', scale, Logexp())
        self.bias = Param('bias', bias, Logexp())

        self.link_parameters(self.variance, self.scale, self.bias)
        assert order >= 1, 'The order of the polynomial has to be at least 1.'
        self.order=order

    def K(self, X, X2=None):
        self._check_input_dim(X)
        _, _, B = self._AB(X, X2)
        return B * self.variance.values

    def _AB(self, X, X2=None):
        if X2 is None:
            dot_prod = np.dot(X, X.T)
        else:
            dot_prod = np.dot(X, X2.T)
        A = (self.scale.values * dot_prod) + self.bias.values
        B = A ** self.order
        return dot_prod, A, B

    def Kdiag(self, X):
        return self.variance.values*(self.scale.values*np.square(X).sum(1) + self.bias.values)**self.order

    def derivative_matrices(self, X):
        dot_prod, A, B = self._AB(X)
        dK_dA = self.variance.values * self.order * A ** (self.order-1.)
        return [B, dK_dA * dot_prod, dK_dA]

    def rescale(self, scale):
        self.variance[:] = self.variance.values*scale
