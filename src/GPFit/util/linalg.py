# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)


import numpy as np
from scipy import linalg
from scipy.linalg import lapack, blas
from .config import config
import logging

logger = logging.getLogger("linalg")


def jitchol(A, epsilon=None, maxtries=None):
    """
    Cholesky factor of the symmetric matrix A, adding jitter to the diagonal
    when A is not numerically positive definite.

    The first jitter is `epsilon`, every failed attempt multiplies it by 10,
    for at most `maxtries` attempts.

    :param A: symmetric NxN matrix
    :param float epsilon: first jitter (defaults to config [cholesky] epsilon)
    :param int maxtries: number of jitter escalations (defaults to config [cholesky] maxtries)
    :returns: lower triangular L with L L^T = A + jitter I
    :raises scipy.linalg.LinAlgError: if no jitter makes A positive definite
    """
    if epsilon is None:
        epsilon = config.getfloat('cholesky', 'epsilon')
    if maxtries is None:
        maxtries = config.getint('cholesky', 'maxtries')
    A = np.ascontiguousarray(A)
    L, info = lapack.dpotrf(A, lower=1)
    if info == 0:
        return L
    diagA = np.diag(A)
    if np.any(diagA <= 0.):
        raise linalg.LinAlgError("not pd: non-positive diagonal elements")
    jitter = epsilon if epsilon > 0 else diagA.mean() * 1e-6
    num_tries = 1
    while num_tries <= maxtries and np.isfinite(jitter):
        try:
            L = linalg.cholesky(A + np.eye(A.shape[0]) * jitter, lower=True)
        except linalg.LinAlgError:
            jitter *= 10
            num_tries += 1
        else:
            logger.warning('Added jitter of {:.10e}'.format(jitter))
            return L
    raise linalg.LinAlgError("not positive definite, even with jitter.")

def dtrtrs(A, B, lower=1):
    """
    Solve A X = B for the triangular matrix A (lapack dtrtrs).

    :returns: X, info
    """
    A = np.asfortranarray(A)
    return lapack.dtrtrs(A, B, lower=lower)

def dpotrs(A, B, lower=1):
    """
    Wrapper for lapack dpotrs function: solves (A A^T) X = B given the
    Cholesky factor A. A one dimensional B gives a one dimensional X.

    :param A: Cholesky factor
    :param B: right hand side, vector or matrix
    :param lower: is matrix lower (true) or upper (false)
    :returns: X, info
    """
    A = np.asfortranarray(A)
    if B.ndim == 1:
        X, info = lapack.dpotrs(A, B[:, None], lower=lower)
        return X[:, 0], info
    return lapack.dpotrs(A, B, lower=lower)

def dpotri(A, lower=1):
    """
    Inverse of A A^T given its Cholesky factor A (lapack dpotri), as a full
    symmetric matrix.

    :returns: inverse, info
    """
    A = np.asfortranarray(A)
    R, info = lapack.dpotri(A, lower=lower)

    symmetrify(R, upper=not lower)
    return R, info

def logdet_chol(L):
    """
    log determinant of A given its Cholesky factor L
    """
    return 2.*np.sum(np.log(np.diag(L)))

def trace_dot(a, b):
    """
    trace(a b), without forming the product
    """
    return np.einsum('ij,ji->', a, b)

def tdot(mat):
    """
    mat mat^T for a 2 dimensional array of doubles. Only one triangle is
    computed (BLAS dsyrk), the other one is copied.
    """
    mat = np.asfortranarray(mat, dtype=np.float64)
    out = blas.dsyrk(alpha=1.0, a=mat, trans=0, lower=0)
    symmetrify(out, upper=True)
    return np.ascontiguousarray(out)

def symmetrify(A, upper=False):
    """
    Copy the strict lower triangle of the square matrix A to its upper
    triangle (the other way round if `upper` is True). Works in place.
    """
    triu = np.triu_indices_from(A, k=1)
    if upper:
        A.T[triu] = A[triu]
    else:
        A[triu] = A.T[triu]
