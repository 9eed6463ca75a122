# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import datetime as dt
import logging
import numpy as np
from ...util.config import config
from ..latent_function_inference.exact_gaussian_inference import gradient_log_marginal, scaled_gradient_log_marginal

logger = logging.getLogger("adam")


class Optimizer(object):
    """
    Superclass for all the optimizers.

    An optimizer works on a model in place: it reads and writes the kernel
    parameters and the noise of the model and refactors its covariance.

    :param max_iters: maximum number of iterations
    :param convergence_fraction: stop when no parameter moves by more than this fraction of its value
    :param max_time: soft limit on the duration of a run, in seconds or as a datetime.timedelta

    Arguments left to None are read from the [fit] section of the configuration.

    :rtype: optimizer object.

    """
    def __init__(self, max_iters=None, convergence_fraction=None, max_time=None):
        self.opt_name = None
        if max_iters is None:
            max_iters = config.getint('fit', 'max_iters')
        if convergence_fraction is None:
            convergence_fraction = config.getfloat('fit', 'convergence_fraction')
        if max_time is None:
            max_time = config.getfloat('fit', 'max_time')
        if not isinstance(max_time, dt.timedelta):
            max_time = dt.timedelta(seconds=max_time)
        assert max_iters > 0, "max_iters has to be positive"
        assert convergence_fraction > 0, "convergence_fraction has to be positive"
        self.max_iters = int(max_iters)
        self.convergence_fraction = float(convergence_fraction)
        self.max_time = max_time
        self.f_opt = None
        self.x_opt = None
        self.iterations = 0
        self.status = None
        self.time = "Not available"

    def run(self, model):
        start = dt.datetime.now()
        self.opt(model)
        end = dt.datetime.now()
        self.time = str(end - start)

    def opt(self, model):
        raise NotImplementedError("this needs to be implemented to use the optimizer class")

    def __str__(self):
        diagnostics = "Optimizer: \t\t\t\t %s\n" % self.opt_name
        diagnostics += "f(x_opt): \t\t\t\t %.3f\n" % self.f_opt
        diagnostics += "Number of iterations: \t\t\t %d\n" % self.iterations
        diagnostics += "Optimization status: \t\t\t %s\n" % self.status
        diagnostics += "Time elapsed: \t\t\t\t %s\n" % self.time
        return diagnostics


class Adam(Optimizer):
    """
    Gradient ascent on the marginal log-likelihood with the ADAM algorithm,
    see Kingma and Ba, "Adam: A Method for Stochastic Optimization" (2014).

    The update is multiplicative: every parameter moves by a fraction delta
    of its own value, p <- p (1 + delta), so that parameters of very
    different magnitudes are fitted at the same pace and keep their sign.

    If `scaled` is False the noise is fitted as well, in log space. If
    `scaled` is True the kernel has to be scalable: at every step the kernel
    and the noise are multiplied by the optimal amplitude (see
    :py:func:`~GPFit.inference.latent_function_inference.exact_gaussian_inference.scaled_gradient_log_marginal`),
    following Anjos et al., "Fast methods for training Gaussian processes on
    large datasets" (2016).

    The model needs the attributes kern, noise, X, Y (the residuals) and L
    and the methods update_cholesky and log_likelihood.
    """
    beta1 = 0.9
    beta2 = 0.999
    epsilon = 1e-8
    learning_rate = 0.1

    def __init__(self, max_iters=None, convergence_fraction=None, max_time=None, scaled=False):
        super(Adam, self).__init__(max_iters, convergence_fraction, max_time)
        self.scaled = scaled
        self.opt_name = "Adam (scaled)" if scaled else "Adam"

    def _gradient(self, model):
        if self.scaled:
            return scaled_gradient_log_marginal(model.L, model.Y, model.X, model.kern)
        grad = gradient_log_marginal(model.L, model.Y, model.X, model.kern, model.noise)
        # chain rule for the noise in log space
        grad[-1] *= model.noise
        return None, grad

    def opt(self, model):
        """
        Run the optimizer on the model, which is modified in place.
        """
        kern = model.kern
        if self.scaled:
            assert kern.is_scalable, "{} cannot be rescaled, use the unscaled fit".format(kern.name)

        start = dt.datetime.now()
        x = kern.get_parameters()
        # a parameter at zero would never move
        x[x == 0.] = self.epsilon
        if not self.scaled:
            x = np.append(x, np.log(model.noise))
        mean = np.zeros(x.size)
        variance = np.zeros(x.size)

        self.status = "Maximum number of iterations reached"
        for i in range(1, self.max_iters + 1):
            scale, grad = self._gradient(model)

            mean = self.beta1*mean + (1. - self.beta1)*grad
            variance = self.beta2*variance + (1. - self.beta2)*np.square(grad)
            mean_hat = mean / (1. - self.beta1**i)
            variance_hat = variance / (1. - self.beta2**i)
            delta = self.learning_rate * mean_hat / (np.sqrt(variance_hat) + self.epsilon)
            had_progress = np.any(np.abs(delta) > self.convergence_fraction)
            x *= 1. + delta

            if self.scaled:
                kern.set_parameters(x)
                kern.rescale(scale)
                model.noise *= scale
                x = kern.get_parameters()
                assert x.size == mean.size, "{} changed its number of parameters from {} to {} when rescaled".format(kern.name, mean.size, x.size)
            else:
                kern.set_parameters(x[:-1])
                model.noise = np.exp(x[-1])

            model.update_cholesky()
            self.iterations = i
            logger.debug("iteration {}: parameters {}, noise {:.6e}".format(i, x, model.noise))

            if not had_progress:
                self.status = "Converged"
                break
            if dt.datetime.now() - start > self.max_time:
                self.status = "Maximum time reached"
                break

        self.x_opt = kern.get_parameters()
        self.f_opt = model.log_likelihood()
        logger.info("{}: {} after {} iterations, log likelihood {:.6f}".format(self.opt_name, self.status, self.iterations, self.f_opt))
