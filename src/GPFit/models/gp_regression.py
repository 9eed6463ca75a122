# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

from ..core import GP
from ..core.gp import _as_inputs, _as_outputs
from .. import kern
from .. import mappings

class GPRegression(GP):
    """
    Gaussian Process model for regression

    This is a thin wrapper around the core.GP class, with a set of sensible defaults

    :param X: input observations
    :param Y: observed values
    :param kernel: a GPFit kernel, defaults to rbf (set to the data with its heuristic fit)
    :param mean_function: a GPFit mapping, defaults to a constant fitted to the mean of Y
    :param noise: the noise standard deviation, defaults to a fraction of std(Y) (see [model] noise_fraction)
    :param cholesky_epsilon: first jitter added to the covariance if it is not positive definite

    The kernel is not fitted to the marginal likelihood here, call fit_parameters(fit_kernel=True) for this.
    """

    def __init__(self, X, Y, kernel=None, mean_function=None, noise=None, cholesky_epsilon=None):
        X = _as_inputs(X)
        Y = _as_outputs(Y)

        if mean_function is None:
            mean_function = mappings.Constant(X.shape[1])
            mean_function.fit(X, Y)

        if kernel is None:
            kernel = kern.RBF(X.shape[1])
            kernel.heuristic_fit(X, Y - mean_function.f(X))

        super(GPRegression, self).__init__(X, Y, kernel, mean_function=mean_function, noise=noise, cholesky_epsilon=cholesky_epsilon, name='GP regression')
