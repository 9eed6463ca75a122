"""
In terms of Gaussian Processes, a kernel is a function that specifies the degree of similarity between variables given their relative positions in parameter space. If known variables *x* and *x'* are close together then observed variables *y* and *y'* may also be similar, depending on the kernel function and its parameters.

:py:class:`GPFit.kern.src.kern.Kern` is a generic kernel object inherited by more specific, end-user kernels used in models. Besides :py:meth:`~GPFit.kern.src.kern.Kern.K`, every kernel provides its parameters as a flat vector and the derivative of its covariance matrix with respect to each of them, which is what the hyperparameter fit of :py:class:`GPFit.core.GP` uses.
"""

from .src.kern import Kern, CombinationKernel
from .src.add import Add
from .src.prod import Prod
from .src.rbf import RBF
from .src.linear import Linear
from .src.static import Bias
from .src.stationary import Exponential, Matern32, Matern52, RatQuad
from .src.poly import Poly
