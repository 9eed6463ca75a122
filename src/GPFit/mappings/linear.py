# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import numpy as np
from scipy import linalg
from ..core.mapping import Mapping
from paramz import Param

class Linear(Mapping):
    """
    A Linear mapping with an intercept.

    .. math::

       F(\\mathbf{x}) = a_0 + \\sum_{q=1}^{\\text{input_dim}} a_q x_q

    :param input_dim: dimension of input.
    :type input_dim: int
    :param A: the weights (intercept first), defaults to zeros
    :type A: array of size input_dim+1

    """

    def __init__(self, input_dim, A=None, name='linmap'):
        super(Linear, self).__init__(input_dim=input_dim, name=name)
        if A is None:
            A = np.zeros(self.input_dim + 1)
        A = np.asarray(A, dtype=np.float64)
        assert A.shape == (self.input_dim + 1,), "need {} weights (intercept first), got shape {!s}".format(self.input_dim + 1, A.shape)
        self.A = Param('A', A)
        self.link_parameter(self.A)

    def _design(self, X):
        return np.hstack([np.ones((X.shape[0], 1)), X])

    def f(self, X):
        return np.dot(self._design(X), self.A.values)

    def fit(self, X, Y):
        """
        Least squares fit, solving the normal equations.

        :raises scipy.linalg.LinAlgError: if the normal equations are singular
        (e.g. fewer distinct points than weights)
        """
        Phi = self._design(X)
        self.A[:] = linalg.solve(np.dot(Phi.T, Phi), np.dot(Phi.T, Y))
