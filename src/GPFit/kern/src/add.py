# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import numpy as np
from .kern import CombinationKernel
from functools import reduce

class Add(CombinationKernel):
    """
    Add given list of kernels together.
    propagates derivatives through.

    NOTE: The subkernels will be copies of the original kernels, to prevent
    unexpected behavior.
    """
    def __init__(self, subkerns, name='sum'):
        _newkerns = []
        for kern in subkerns:
            if isinstance(kern, Add):
                for part in kern.parts:
                    _newkerns.append(part.copy())
            else:
                _newkerns.append(kern.copy())

        super(Add, self).__init__(_newkerns, name)

    @property
    def is_scalable(self):
        return all(p.is_scalable for p in self.parts)

    def K(self, X, X2=None):
        """
        Add all kernels together.
        """
        return reduce(np.add, (p.K(X, X2) for p in self.parts))

    def Kdiag(self, X):
        return reduce(np.add, (p.Kdiag(X) for p in self.parts))

    def derivative_matrices(self, X):
        return [dK for p in self.parts for dK in p.derivative_matrices(X)]

    def rescale(self, scale):
        assert self.is_scalable, "{} has parts which cannot be rescaled".format(self.name)
        for p in self.parts:
            p.rescale(scale)
