# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

"""
Exact inference over Gaussian process latent functions
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

In all our GP models, the consistency property means that we have a Gaussian
prior over a finite set of points f. This prior is:

.. math::
    N(f | 0, K)

where :math:`K` is the kernel matrix. With a Gaussian likelihood of standard
deviation :math:`\\sigma` the outputs are distributed as

.. math::
    N(y | 0, K + \\sigma^2 I)

and everything the models need (the Cholesky factor of this covariance, the
marginal log-likelihood and its gradient with respect to the
hyperparameters) is computed in closed form in
:py:mod:`GPFit.inference.latent_function_inference.exact_gaussian_inference`.
"""

from .exact_gaussian_inference import cholesky_covariance, log_marginal, gradient_log_marginal, scaled_gradient_log_marginal
