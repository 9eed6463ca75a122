# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import numpy as np
from .mapping import Mapping
from ..inference.latent_function_inference.exact_gaussian_inference import cholesky_covariance, log_marginal
from ..inference.optimization import Adam
from ..util.growable import GrowableMatrix, GrowableVector
from ..util.linalg import dpotrs, dtrtrs
from ..util.config import config

import logging
logger = logging.getLogger("GP")

def _as_inputs(X):
    X = np.asarray(X, dtype=np.float64)
    if X.ndim == 1:
        X = X[:, None]
    assert X.ndim == 2, "inputs need to be N x input_dim, got shape {!s}".format(X.shape)
    return X

def _as_outputs(Y):
    Y = np.asarray(Y, dtype=np.float64)
    if Y.ndim == 2:
        assert Y.shape[1] == 1, "only one output dimension is supported, got shape {!s}".format(Y.shape)
        Y = Y[:, 0]
    assert Y.ndim == 1, "outputs need to be a vector, got shape {!s}".format(Y.shape)
    return Y


class GP(object):
    """
    Gaussian process regression with Gaussian observation noise

    The GP models the residuals Y - m(X) of the outputs with respect to the
    prior mean m (the mean_function) with covariance

    .. math::
        K(X, X) + \\sigma^2 I

    :param X: input observations (N x input_dim, or a vector when input_dim is 1)
    :param Y: output observations (a vector of length N, or N x 1)
    :param kernel: a GPFit kernel
    :param mean_function: a GPFit mapping, defaults to zero
    :param noise: standard deviation :math:`\\sigma` of the observation noise, defaults to a fraction of std(Y) (see [model] noise_fraction)
    :param cholesky_epsilon: first jitter used when the covariance is not positive definite, defaults to [cholesky] epsilon
    :rtype: model object

    Samples can be added at any time with :py:meth:`add_samples`; the
    training data lives in growable buffers so that adding a few samples
    does not reallocate the whole training set.
    """
    def __init__(self, X, Y, kernel, mean_function=None, noise=None, cholesky_epsilon=None, name='gp'):
        self.name = name
        X = _as_inputs(X)
        Y = _as_outputs(Y)
        assert X.shape[0] == Y.shape[0], "{} inputs for {} outputs".format(X.shape[0], Y.shape[0])
        assert X.shape[0] > 0, "at least one sample is needed"
        assert kernel.input_dim == X.shape[1], "kernel input_dim is {}, data has {} columns".format(kernel.input_dim, X.shape[1])
        self.kern = kernel

        if mean_function is None:
            from ..mappings import Zero
            mean_function = Zero(X.shape[1])
        assert isinstance(mean_function, Mapping)
        assert mean_function.input_dim == X.shape[1]
        self.mean_function = mean_function

        if noise is None:
            noise = config.getfloat('model', 'noise_fraction') * np.std(Y)
        self.noise = float(noise)
        if cholesky_epsilon is None:
            cholesky_epsilon = config.getfloat('cholesky', 'epsilon')
        self.cholesky_epsilon = cholesky_epsilon

        logger.info("initializing training data")
        self._X = GrowableMatrix(X)
        self._Y = GrowableVector(Y)
        self._residuals = GrowableVector(Y - self.mean_function.f(X))
        self.optimization_runs = []
        self.update_cholesky()

    @property
    def X(self):
        """training inputs (read-only)"""
        return self._X.view()

    @property
    def Y(self):
        """training residuals, outputs minus prior mean (read-only)"""
        return self._residuals.view()

    @property
    def outputs(self):
        """training outputs (read-only)"""
        return self._Y.view()

    @property
    def num_data(self):
        return self._X.size

    @property
    def input_dim(self):
        return self._X.num_columns

    def update_cholesky(self):
        """
        Refactor the covariance of the training data, to be called whenever
        the kernel, the noise or the inputs change.
        """
        self.L = cholesky_covariance(self.kern, self.X, self.noise, self.cholesky_epsilon)

    def _update_residuals(self):
        self._residuals.assign(self.outputs - self.mean_function.f(self.X))

    def add_samples(self, X, Y):
        """
        Add samples to the training data. The prior and the kernel are not
        refitted (see :py:meth:`fit_parameters`).

        :param X: new inputs (N x input_dim, or a vector when input_dim is 1)
        :param Y: new outputs
        """
        X = _as_inputs(X)
        Y = _as_outputs(Y)
        assert X.shape[0] == Y.shape[0], "{} inputs for {} outputs".format(X.shape[0], Y.shape[0])
        self._X.append(X)
        self._Y.append(Y)
        self._residuals.append(Y - self.mean_function.f(X))
        self.update_cholesky()
        logger.debug("added {} samples, {} in total".format(X.shape[0], self.num_data))

    def fit_parameters(self, fit_prior=None, fit_kernel=None, max_iters=None, convergence_fraction=None, max_time=None):
        """
        Fit the prior mean to the training outputs and/or the hyperparameters
        (kernel and noise) to the marginal log-likelihood.

        Scalable kernels are fitted with :py:meth:`scaled_optimize_parameters`,
        others with :py:meth:`optimize_parameters`.

        Arguments left to None are read from the [fit] section of the configuration.
        """
        if fit_prior is None:
            fit_prior = config.getboolean('fit', 'fit_prior')
        if fit_kernel is None:
            fit_kernel = config.getboolean('fit', 'fit_kernel')
        if fit_prior:
            self.mean_function.fit(self.X, self.outputs)
            self._update_residuals()
        if fit_kernel:
            if self.kern.is_scalable:
                self.scaled_optimize_parameters(max_iters, convergence_fraction, max_time)
            else:
                self.optimize_parameters(max_iters, convergence_fraction, max_time)

    def optimize_parameters(self, max_iters=None, convergence_fraction=None, max_time=None):
        """
        Fit the kernel parameters and the noise with :py:class:`~GPFit.inference.optimization.Adam`.

        :param max_iters: maximum number of iterations
        :param convergence_fraction: stop when no parameter moves by more than this fraction of its value
        :param max_time: soft limit on the duration of the fit (seconds or datetime.timedelta)
        """
        opt = Adam(max_iters, convergence_fraction, max_time, scaled=False)
        opt.run(self)
        self.optimization_runs.append(opt)

    def scaled_optimize_parameters(self, max_iters=None, convergence_fraction=None, max_time=None):
        """
        As :py:meth:`optimize_parameters`, the noise being fitted by rescaling
        the kernel and the noise to their optimal amplitude at every step.
        The kernel needs to be scalable.
        """
        opt = Adam(max_iters, convergence_fraction, max_time, scaled=True)
        opt.run(self)
        self.optimization_runs.append(opt)

    def log_likelihood(self):
        """
        The log marginal likelihood of the model, :math:`p(\\mathbf{y})`, this is the objective function of the hyperparameter fit
        """
        return log_marginal(self.L, self.Y)

    def _raw_predict(self, Xnew, full_cov=False):
        """
        Posterior of the latent function at Xnew, without the observation noise.

        .. math::
            p(f*|X*, X, Y) = N(f*| m(X*) + K_{x*x}(K_{xx} + \\sigma^2 I)^{-1}Y, K_{x*x*} - K_{xx*}(K_{xx} + \\sigma^2 I)^{-1}K_{xx*})
        """
        Xnew = _as_inputs(Xnew)
        Kx = self.kern.K(self.X, Xnew)
        alpha, _ = dpotrs(self.L, self.Y, lower=1)
        mu = np.dot(Kx.T, alpha) + self.mean_function.f(Xnew)
        tmp, _ = dtrtrs(self.L, Kx, lower=1)
        if full_cov:
            var = self.kern.K(Xnew) - np.dot(tmp.T, tmp)
        else:
            var = np.clip(self.kern.Kdiag(Xnew) - np.sum(np.square(tmp), 0), 0., np.inf)
        return mu, var

    def predict(self, Xnew, full_cov=False, include_likelihood=True):
        """
        Predict the function at the new point(s) Xnew. This includes the noise
        variance added to the predicted underlying function, unless
        include_likelihood is False.

        :param Xnew: The points at which to make a prediction
        :type Xnew: np.ndarray (Nnew x self.input_dim)
        :param full_cov: whether to return the full covariance matrix, or just
                         the diagonal
        :type full_cov: bool
        :returns: (mean, var):
            mean: posterior mean, a vector of length Nnew
            var: posterior variance, a vector of length Nnew if full_cov=False, Nnew x Nnew otherwise
        """
        mu, var = self._raw_predict(Xnew, full_cov=full_cov)
        if include_likelihood:
            if full_cov:
                var[np.diag_indices_from(var)] += self.noise**2
            else:
                var = var + self.noise**2
        return mu, var

    def predict_mean(self, Xnew):
        """posterior mean at Xnew"""
        return self._raw_predict(Xnew)[0]

    def predict_variance(self, Xnew):
        """variance of the underlying function at Xnew (no observation noise)"""
        return self._raw_predict(Xnew)[1]

    def predict_covariance(self, Xnew):
        """covariance of the underlying function between the points of Xnew (no observation noise)"""
        return self._raw_predict(Xnew, full_cov=True)[1]

    def posterior_samples_f(self, X, size=10, rng=None):
        """
        Samples the posterior GP at the points X.

        :param X: The points at which to take the samples.
        :type X: np.ndarray (Nnew x self.input_dim)
        :param size: the number of a posteriori samples.
        :type size: int.
        :param rng: a numpy Generator (or RandomState), defaults to the numpy global random state
        :returns: fsim: set of simulations
        :rtype: np.ndarray (Nnew x size)
        """
        if rng is None:
            rng = np.random
        m, v = self._raw_predict(X, full_cov=True)
        return rng.multivariate_normal(m, v, size).T

    def __str__(self):
        s = ["{}: {} samples, input_dim {}".format(self.name, self.num_data, self.input_dim),
             "noise: {:.6e}".format(self.noise),
             "log likelihood: {:.6f}".format(self.log_likelihood()),
             str(self.kern), str(self.mean_function)]
        return "\n".join(s)
