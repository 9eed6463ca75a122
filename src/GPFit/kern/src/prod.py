# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import numpy as np
from .kern import CombinationKernel
from functools import reduce


class Prod(CombinationKernel):
    """
    Computes the product of 2 kernels

    :param k1, k2: the kernels to multiply
    :type k1, k2: Kern
    :rtype: kernel object

    Scalable as soon as one of the parts is: only the first scalable part is
    rescaled.
    """
    def __init__(self, kernels, name='mul'):
        _newkerns = []
        for kern in kernels:
            if isinstance(kern, Prod):
                for part in kern.parts:
                    _newkerns.append(part.copy())
            else:
                _newkerns.append(kern.copy())

        super(Prod, self).__init__(_newkerns, name)

    @property
    def is_scalable(self):
        return any(p.is_scalable for p in self.parts)

    def K(self, X, X2=None):
        return reduce(np.multiply, (p.K(X, X2) for p in self.parts))

    def Kdiag(self, X):
        return reduce(np.multiply, (p.Kdiag(X) for p in self.parts))

    def derivative_matrices(self, X):
        Ks = [p.K(X) for p in self.parts]
        derivatives = []
        for i, p in enumerate(self.parts):
            others = [K for j, K in enumerate(Ks) if j != i]
            rest = reduce(np.multiply, others) if others else 1.
            derivatives.extend(dK*rest for dK in p.derivative_matrices(X))
        return derivatives

    def rescale(self, scale):
        for p in self.parts:
            if p.is_scalable:
                p.rescale(scale)
                return
        raise NotImplementedError("{} has no part which can be rescaled".format(self.name))
