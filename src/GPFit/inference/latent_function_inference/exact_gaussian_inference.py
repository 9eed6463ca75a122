# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

"""
Marginal log-likelihood of a GP with Gaussian noise and its gradient with
respect to the hyperparameters.

All functions take the lower Cholesky factor L of

.. math::
    K_y = K(X, X) + \\sigma^2 I

and the residuals Y (outputs minus prior mean) as a flat vector.

The gradient with respect to a parameter :math:`\\theta` with
:math:`D = \\partial K_y / \\partial \\theta` is

.. math::
    \\frac{\\partial \\log p(y)}{\\partial \\theta} = \\frac{1}{2} \\left( \\alpha^\\top D \\alpha - \\mathrm{tr}(K_y^{-1} D) \\right), \\quad \\alpha = K_y^{-1} y

which we evaluate in O(N^2) per parameter: the product :math:`K_y^{-1} D`
is never formed.
"""

import numpy as np
from ...util.linalg import jitchol, dpotri, dpotrs, logdet_chol, trace_dot
log_2_pi = np.log(2*np.pi)


def cholesky_covariance(kern, X, noise, epsilon=None, maxtries=None):
    """
    Cholesky factor of K(X, X) + noise^2 I, jitter is added if needed (see :py:func:`GPFit.util.linalg.jitchol`).

    :param kern: the kernel
    :param X: training inputs (N x input_dim)
    :param float noise: standard deviation of the observation noise
    :raises scipy.linalg.LinAlgError: when the covariance is not positive definite even with jitter
    """
    Ky = kern.K(X)
    Ky[np.diag_indices_from(Ky)] += noise**2
    return jitchol(Ky, epsilon, maxtries)

def log_marginal(L, Y):
    """
    log p(Y) = -0.5 (Y^T K_y^-1 Y + log|K_y| + N log(2 pi))
    """
    alpha, _ = dpotrs(L, Y, lower=1)
    return -0.5*(np.dot(Y, alpha) + logdet_chol(L) + Y.size*log_2_pi)

def _data_fit_and_complexity(L, Y, X, kern):
    Ki, _ = dpotri(L, lower=1)
    alpha = np.dot(Ki, Y)
    data_fit = []
    complexity = []
    for dK in kern.derivative_matrices(X):
        data_fit.append(np.dot(alpha, np.dot(dK, alpha)))
        complexity.append(trace_dot(Ki, dK))
    return Ki, alpha, np.array(data_fit), np.array(complexity)

def gradient_log_marginal(L, Y, X, kern, noise):
    """
    Gradient of the marginal log-likelihood with respect to the kernel
    parameters (in the order of kern.get_parameters()) followed by the noise.

    :param L: lower Cholesky factor of K(X, X) + noise^2 I
    :param Y: residuals, vector of length N
    :param X: training inputs
    :param kern: the kernel, supplies the derivative matrices
    :param float noise: standard deviation of the observation noise
    :returns: vector of length kern.num_params + 1
    """
    Ki, alpha, data_fit, complexity = _data_fit_and_complexity(L, Y, X, kern)
    grad = 0.5*(data_fit - complexity)
    # dK_y/dnoise = 2 noise I
    grad_noise = noise*(np.dot(alpha, alpha) - np.trace(Ki))
    return np.append(grad, grad_noise)

def scaled_gradient_log_marginal(L, Y, X, kern):
    """
    Gradient of the marginal log-likelihood with respect to the kernel
    parameters, when the amplitude of the covariance (noise included) is
    set to its optimum, which is

    .. math::
        s = \\frac{y^\\top K_y^{-1} y}{N}

    No gradient is returned for the noise: it is multiplied by the scale
    together with the kernel.

    :returns: (scale, gradient) with gradient of length kern.num_params
    """
    _, alpha, data_fit, complexity = _data_fit_and_complexity(L, Y, X, kern)
    scale = np.dot(Y, alpha) / Y.size
    grad = 0.5*(data_fit/scale - complexity)
    return scale, grad
