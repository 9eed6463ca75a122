# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)
import numpy as np
from paramz import Parameterized
from functools import reduce


class Kern(Parameterized):
    """
    The base class for a kernel: a positive definite function
    which forms of a covariance function (kernel).

    Besides the covariance itself, a kernel exposes its parameters as one
    flat vector (in the order of ``param_array``) and, for every entry of
    that vector, the derivative of the covariance matrix with respect to it.
    These are what the hyperparameter fit works on.

    A kernel is *scalable* when it has an amplitude which multiplies the
    whole covariance: such kernels can be fitted with the scale invariant
    gradient, which finds the optimal amplitude in closed form.

    :param int input_dim: the number of input dimensions to the function

    Do not instantiate.
    """
    is_scalable = False

    def __init__(self, input_dim, name, *a, **kw):
        super(Kern, self).__init__(name=name, *a, **kw)
        self.input_dim = int(input_dim)

    def K(self, X, X2=None):
        """
        Compute the kernel function.

        .. math::
            K_{ij} = k(X_i, X_j)

        :param X: the first set of inputs to the kernel
        :param X2: (optional) the second set of arguments to the kernel. If X2
                   is None, this is taken to be X.
        """
        raise NotImplementedError

    def Kdiag(self, X):
        """
        The diagonal of the kernel matrix K

        .. math::
            Kdiag_{i} = k(X_i, X_i)
        """
        raise NotImplementedError

    def derivative_matrices(self, X):
        """
        Derivatives of K(X, X) with respect to every parameter of the kernel.

        :returns: list of NxN arrays, one per entry of :py:meth:`get_parameters`, in the same order
        """
        raise NotImplementedError

    def rescale(self, scale):
        """
        Multiply the amplitude of the kernel by scale. Only available on scalable kernels.
        """
        raise NotImplementedError("{} is not a scalable kernel".format(self.name))

    def heuristic_fit(self, X, Y):
        """
        Set the parameters to sensible values for the data (X, Y), as a
        starting point for the gradient based fit. Does nothing by default.
        """
        pass

    def get_parameters(self):
        """
        The parameters of this kernel as a flat vector (a copy).
        """
        return self.param_array.copy()

    def set_parameters(self, values):
        """
        Set all parameters of this kernel from a flat vector ordered as :py:meth:`get_parameters`.
        """
        values = np.asarray(values, dtype=np.float64)
        assert values.size == self.param_array.size, "{} expects {} parameters, got {}".format(self.name, self.param_array.size, values.size)
        self.param_array[:] = values
        self.trigger_update()

    @property
    def num_params(self):
        return self.param_array.size

    def __add__(self, other):
        """ Overloading of the '+' operator. for more control, see self.add """
        return self.add(other)

    def add(self, other, name='sum'):
        """
        Add another kernel to this one.

        :param other: the other kernel to be added
        :type other: GPFit.kern

        """
        assert isinstance(other, Kern), "only kernels can be added to kernels..."
        from .add import Add
        return Add([self, other], name=name)

    def __mul__(self, other):
        """ Here we overload the '*' operator. See self.prod for more information"""
        return self.prod(other)

    def prod(self, other, name='mul'):
        """
        Multiply two kernels on the same space.

        :param other: the other kernel to be multiplied
        :type other: GPFit.kern

        """
        assert isinstance(other, Kern), "only kernels can be multiplied to kernels..."
        from .prod import Prod
        return Prod([self, other], name)

    def _check_input_dim(self, X):
        assert X.shape[1] == self.input_dim, "{}: X has wrong shape: X_dim={}, whereas input_dim={}".format(self.name, X.shape[1], self.input_dim)


class CombinationKernel(Kern):
    """
    Abstract super class for combination kernels.
    A combination kernel combines (a list of) kernels and works on those.
    Examples are the Add and Prod kernels.

    :param list kernels: List of kernels to combine, all on the same input space
    :param str name: name of the combination kernel
    """
    def __init__(self, kernels, name):
        assert all([isinstance(k, Kern) for k in kernels])
        input_dim = reduce(max, (k.input_dim for k in kernels))
        assert all([k.input_dim == input_dim for k in kernels]), "combined kernels need the same input_dim"
        super(CombinationKernel, self).__init__(input_dim, name)
        self.link_parameters(*kernels)

    @property
    def parts(self):
        return self.parameters

    def heuristic_fit(self, X, Y):
        for p in self.parts:
            p.heuristic_fit(X, Y)
