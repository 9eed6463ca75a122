# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

from paramz import Parameterized

class Mapping(Parameterized):
    """
    Base model for shared mapping behaviours

    A mapping is used as the prior mean of a GP: the GP models the residuals
    Y - f(X). Mappings with a closed form fit to the training data
    implement :py:meth:`fit`.
    """

    def __init__(self, input_dim, name='mapping'):
        self.input_dim = input_dim
        super(Mapping, self).__init__(name=name)

    def f(self, X):
        """
        Evaluate the mapping on the N x input_dim inputs X, returns a vector of length N.
        """
        raise NotImplementedError

    def fit(self, X, Y):
        """
        Fit the mapping to the inputs X and outputs Y. Does nothing by default.
        """
        pass
