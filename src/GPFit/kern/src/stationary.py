# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)


import numpy as np
from .kern import Kern
from ...util.linalg import tdot
from paramz import Param
from paramz.transformations import Logexp


class Stationary(Kern):
    """
    Stationary kernels (covariance functions).

    Stationary covariance fucntion depend only on r, where r is defined as

    .. math::
        r(x, x') = \\sqrt{ \\sum_{q=1}^Q (x_q - x'_q)^2 }

    The covariance function k(x, x' can then be written k(r).

    In this implementation, r is scaled by the lengthscales parameter(s):

    .. math::

        r(x, x') = \\sqrt{ \\sum_{q=1}^Q \\frac{(x_q - x'_q)^2}{\\ell_q^2} }.

    By default, there's only one lengthscale: seaprate lengthscales for each
    dimension can be enables by setting ARD=True.

    To implement a stationary covariance function using this class, one need
    only define the unit variance covariance function k(r), and its derivative.

    ```
    def k_of_r(self, r):
        return foo
    def dk_dr(self, r):
        return bar
    ```

    The variance and lengthscale(s) parameters are added to the structure
    automatically, in this order. The variance multiplies the whole
    covariance, so all stationary kernels are scalable.

    """
    is_scalable = True

    def __init__(self, input_dim, variance, lengthscale, ARD, name):
        super(Stationary, self).__init__(input_dim, name)
        self.ARD = ARD
        if not ARD:
            if lengthscale is None:
                lengthscale = np.ones(1)
            else:
                lengthscale = np.asarray(lengthscale)
                assert lengthscale.size == 1, "Only 1 lengthscale needed for non-ARD kernel"
        else:
            if lengthscale is not None:
                lengthscale = np.asarray(lengthscale)
                assert lengthscale.size in [1, input_dim], "Bad number of lengthscales"
                if lengthscale.size != input_dim:
                    lengthscale = np.ones(input_dim)*lengthscale
            else:
                lengthscale = np.ones(self.input_dim)
        self.variance = Param('variance', variance, Logexp())
        self.lengthscale = Param('lengthscale', lengthscale, Logexp())
        assert self.variance.size==1
        self.link_parameters(self.variance, self.lengthscale)

    def k_of_r(self, r):
        raise NotImplementedError("implement the unit variance covariance function as a fn of r to use this class")

    def dk_dr(self, r):
        raise NotImplementedError("implement derivative of the unit variance covariance function wrt r to use this class")

    def K_of_r(self, r):
        return self.variance.values * self.k_of_r(r)

    def dK_dr(self, r):
        return self.variance.values * self.dk_dr(r)

    def K(self, X, X2=None):
        """
        Kernel function applied on inputs X and X2.
        In the stationary case there is an inner function depending on the
        distances from X to X2, called r.

        K(X, X2) = K_of_r((X-X2)**2)
        """
        self._check_input_dim(X)
        r = self._scaled_dist(X, X2)
        return self.K_of_r(r)

    def Kdiag(self, X):
        ret = np.empty(X.shape[0])
        ret[:] = self.variance.values
        return ret

    def _unscaled_dist(self, X, X2=None):
        """
        Compute the Euclidean distance between each row of X and X2, or between
        each pair of rows of X if X2 is None.
        """
        if X2 is None:
            Xsq = np.sum(np.square(X),1)
            r2 = -2.*tdot(X) + (Xsq[:,None] + Xsq[None,:])
            np.fill_diagonal(r2, 0.) # force diagnoal to be zero: sometime numerically a little negative
            r2 = np.clip(r2, 0, np.inf)
            return np.sqrt(r2)
        else:
            X1sq = np.sum(np.square(X),1)
            X2sq = np.sum(np.square(X2),1)
            r2 = -2.*np.dot(X, X2.T) + X1sq[:,None] + X2sq[None,:]
            r2 = np.clip(r2, 0, np.inf)
            return np.sqrt(r2)

    def _scaled_dist(self, X, X2=None):
        """
        Efficiently compute the scaled distance, r.

        ..math::
            r = \\sqrt( \\sum_{q=1}^Q (x_q - x'q)^2/l_q^2 )

        Note that if thre is only one lengthscale, l comes outside the sum. In
        this case we compute the unscaled distance first and divide by
        lengthscale afterwards

        """
        lengthscale = self.lengthscale.values
        if self.ARD:
            if X2 is not None:
                X2 = X2 / lengthscale
            return self._unscaled_dist(X/lengthscale, X2)
        else:
            return self._unscaled_dist(X, X2)/lengthscale

    def _inv_dist(self, r):
        """
        Elementwise inverse of the distance matrix r, except where the
        distance is zero, where we return zero. This term appears in
        derviatives.
        """
        return 1./np.where(r != 0., r, np.inf)

    def derivative_matrices(self, X):
        """
        dK/dvariance, then dK/dlengthscale (one matrix per lengthscale if ARD).

        Through r, the lengthscale derivatives are

        .. math::
            \\frac{\\partial K}{\\partial \\ell_q} = -\\frac{\\partial K}{\\partial r} \\frac{(x_q - x'_q)^2}{\\ell_q^3 r}
        """
        self._check_input_dim(X)
        r = self._scaled_dist(X)
        dK_dr = self.dK_dr(r)
        lengthscale = self.lengthscale.values
        derivatives = [self.k_of_r(r)]
        if self.ARD:
            tmp = dK_dr*self._inv_dist(r)
            for q in range(self.input_dim):
                sqdist = np.square(X[:,q:q+1] - X[:,q:q+1].T)
                derivatives.append(-tmp*sqdist/lengthscale[q]**3)
        else:
            derivatives.append(-dK_dr*r/lengthscale[0])
        return derivatives

    def rescale(self, scale):
        self.variance[:] = self.variance.values*scale

    def heuristic_fit(self, X, Y):
        """
        variance: the variance of the outputs,
        lengthscale: the mean distance between two inputs (per dimension if ARD).
        """
        variance = np.var(Y)
        if variance > 0.:
            self.variance[:] = variance
        N = X.shape[0]
        if N < 2:
            return
        iu = np.triu_indices(N, k=1)
        if self.ARD:
            lengthscale = np.array([np.mean(np.abs(X[:,q:q+1] - X[:,q:q+1].T)[iu]) for q in range(self.input_dim)])
            lengthscale[lengthscale <= 0.] = 1.
        else:
            lengthscale = np.mean(self._unscaled_dist(X)[iu])
            if lengthscale <= 0.:
                lengthscale = 1.
        self.lengthscale[:] = lengthscale


class Exponential(Stationary):
    """
    Exponential kernel (also known as Ornstein-Uhlenbeck):

    .. math::

       k(r) = \\sigma^2 \\exp(- r)

    """
    def __init__(self, input_dim, variance=1., lengthscale=None, ARD=False, name='Exponential'):
        super(Exponential, self).__init__(input_dim, variance, lengthscale, ARD, name)

    def k_of_r(self, r):
        return np.exp(-r)

    def dk_dr(self, r):
        return -np.exp(-r)


class Matern32(Stationary):
    """
    Matern 3/2 kernel:

    .. math::

       k(r) = \\sigma^2 (1 + \\sqrt{3} r) \\exp(- \\sqrt{3} r) \\ \\ \\ \\  \\text{ where  } r = \\sqrt{\\sum_{i=1}^{\\text{input_dim}} \\frac{(x_i-y_i)^2}{\\ell_i^2} }

    """

    def __init__(self, input_dim, variance=1., lengthscale=None, ARD=False, name='Mat32'):
        super(Matern32, self).__init__(input_dim, variance, lengthscale, ARD, name)

    def k_of_r(self, r):
        return (1. + np.sqrt(3.) * r) * np.exp(-np.sqrt(3.) * r)

    def dk_dr(self,r):
        return -3.*r*np.exp(-np.sqrt(3.)*r)


class Matern52(Stationary):
    """
    Matern 5/2 kernel:

    .. math::

       k(r) = \\sigma^2 (1 + \\sqrt{5} r + \\frac53 r^2) \\exp(- \\sqrt{5} r)
    """
    def __init__(self, input_dim, variance=1., lengthscale=None, ARD=False, name='Mat52'):
        super(Matern52, self).__init__(input_dim, variance, lengthscale, ARD, name)

    def k_of_r(self, r):
        return (1+np.sqrt(5.)*r+5./3*r**2)*np.exp(-np.sqrt(5.)*r)

    def dk_dr(self, r):
        return (10./3*r -5.*r -5.*np.sqrt(5.)/3*r**2)*np.exp(-np.sqrt(5.)*r)


class RatQuad(Stationary):
    """
    Rational Quadratic Kernel

    .. math::

       k(r) = \\sigma^2 \\bigg( 1 + \\frac{r^2}{2} \\bigg)^{- \\alpha}

    The power :math:`\\alpha` comes after variance and lengthscale(s) in the parameters.
    """

    def __init__(self, input_dim, variance=1., lengthscale=None, power=2., ARD=False, name='RatQuad'):
        super(RatQuad, self).__init__(input_dim, variance, lengthscale, ARD, name)
        self.power = Param('power', power, Logexp())
        self.link_parameters(self.power)

    def k_of_r(self, r):
        r2 = np.square(r)
        return np.exp(-self.power.values*np.log1p(r2/2.))

    def dk_dr(self, r):
        r2 = np.square(r)
        return -self.power.values*r*np.exp(-(self.power.values+1)*np.log1p(r2/2.))

    def derivative_matrices(self, X):
        derivatives = super(RatQuad, self).derivative_matrices(X)
        r = self._scaled_dist(X)
        derivatives.append(-self.K_of_r(r)*np.log1p(np.square(r)/2.))
        return derivatives
