# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import unittest
import numpy as np
import GPFit


def numerical_derivative_matrices(kern, X, step=1e-6):
    """central differences of K(X, X) with respect to every parameter"""
    params = kern.get_parameters()
    derivatives = []
    for i in range(params.size):
        p = params.copy()
        p[i] += step
        kern.set_parameters(p)
        K_plus = kern.K(X)
        p[i] -= 2*step
        kern.set_parameters(p)
        K_minus = kern.K(X)
        derivatives.append((K_plus - K_minus)/(2*step))
    kern.set_parameters(params)
    return derivatives


class KernelDerivativeTests(unittest.TestCase):
    def setUp(self):
        self.X = np.random.RandomState(3).rand(6, 2)

    def check_kernel(self, kern):
        analytic = kern.derivative_matrices(self.X)
        numeric = numerical_derivative_matrices(kern, self.X)
        self.assertEqual(len(analytic), kern.num_params)
        for a, n in zip(analytic, numeric):
            self.assertEqual(a.shape, (self.X.shape[0], self.X.shape[0]))
            np.testing.assert_allclose(a, n, rtol=1e-4, atol=1e-7)

    def test_RBF(self):
        self.check_kernel(GPFit.kern.RBF(2, variance=1.3, lengthscale=0.7))

    def test_RBF_ARD(self):
        self.check_kernel(GPFit.kern.RBF(2, variance=0.8, lengthscale=[0.5, 2.], ARD=True))

    def test_Exponential(self):
        self.check_kernel(GPFit.kern.Exponential(2, variance=2., lengthscale=1.5))

    def test_Matern32(self):
        self.check_kernel(GPFit.kern.Matern32(2, variance=0.5, lengthscale=[0.3, 0.9], ARD=True))

    def test_Matern52(self):
        self.check_kernel(GPFit.kern.Matern52(2, lengthscale=0.6))

    def test_RatQuad(self):
        self.check_kernel(GPFit.kern.RatQuad(2, variance=1.1, lengthscale=0.8, power=1.5))

    def test_Linear(self):
        self.check_kernel(GPFit.kern.Linear(2, variances=0.7))

    def test_Linear_ARD(self):
        self.check_kernel(GPFit.kern.Linear(2, variances=[0.7, 1.9], ARD=True))

    def test_Bias(self):
        self.check_kernel(GPFit.kern.Bias(2, variance=0.4))

    def test_Poly(self):
        self.check_kernel(GPFit.kern.Poly(2, variance=0.9, scale=1.2, bias=0.5, order=3))

    def test_Add(self):
        self.check_kernel(GPFit.kern.RBF(2, lengthscale=0.5) + GPFit.kern.Linear(2, variances=0.3))

    def test_Prod(self):
        self.check_kernel(GPFit.kern.Matern32(2) * GPFit.kern.Linear(2, variances=[0.3, 1.], ARD=True))


class KernelTests(unittest.TestCase):
    def setUp(self):
        self.X = np.random.RandomState(4).randn(5, 1)
        self.X2 = np.random.RandomState(5).randn(3, 1)
        self.kernels = [GPFit.kern.RBF(1), GPFit.kern.Exponential(1), GPFit.kern.Matern32(1),
                        GPFit.kern.Matern52(1), GPFit.kern.RatQuad(1), GPFit.kern.Linear(1),
                        GPFit.kern.Bias(1), GPFit.kern.Poly(1, order=2),
                        GPFit.kern.RBF(1) + GPFit.kern.Bias(1), GPFit.kern.RBF(1) * GPFit.kern.Linear(1)]

    def test_K_symmetric_and_Kdiag(self):
        for k in self.kernels:
            K = k.K(self.X)
            np.testing.assert_allclose(K, K.T, err_msg=k.name)
            np.testing.assert_allclose(np.diag(K), k.Kdiag(self.X), err_msg=k.name)
            self.assertEqual(k.K(self.X, self.X2).shape, (5, 3))
            np.testing.assert_allclose(k.K(self.X, self.X2), k.K(self.X2, self.X).T, err_msg=k.name)

    def test_rescale(self):
        for k in self.kernels:
            self.assertTrue(k.is_scalable)
            K = k.K(self.X)
            n = k.num_params
            k.rescale(2.5)
            self.assertEqual(k.num_params, n)
            np.testing.assert_allclose(k.K(self.X), 2.5*K, err_msg=k.name)

    def test_parameters_roundtrip_order(self):
        k = GPFit.kern.RatQuad(1, variance=2., lengthscale=3., power=4.)
        np.testing.assert_array_equal(k.get_parameters(), [2., 3., 4.])
        k.set_parameters([5., 6., 7.])
        self.assertEqual(k.variance.values[0], 5.)
        self.assertEqual(k.lengthscale.values[0], 6.)
        self.assertEqual(k.power.values[0], 7.)
        with self.assertRaises(AssertionError):
            k.set_parameters([1., 2.])

    def test_combination_scalability(self):
        class Fixed(GPFit.kern.RBF):
            is_scalable = False
            rescale = GPFit.kern.Kern.rescale
        with self.assertRaises(NotImplementedError):
            Fixed(1).rescale(2.)

        add = Fixed(1) + GPFit.kern.RBF(1)
        self.assertFalse(add.is_scalable)
        with self.assertRaises(AssertionError):
            add.rescale(2.)

        prod = Fixed(1) * GPFit.kern.Linear(1)
        self.assertTrue(prod.is_scalable)
        K = prod.K(self.X)
        prod.rescale(3.)
        np.testing.assert_allclose(prod.K(self.X), 3.*K)

        prod = Fixed(1) * Fixed(1)
        self.assertFalse(prod.is_scalable)
        with self.assertRaises(NotImplementedError):
            prod.rescale(3.)

    def test_input_dim_mismatch(self):
        with self.assertRaises(AssertionError):
            GPFit.kern.RBF(2).K(self.X)
        with self.assertRaises(AssertionError):
            GPFit.kern.RBF(2) + GPFit.kern.RBF(1)

    def test_heuristic_fit(self):
        X = np.array([[0.], [1.], [3.]])
        Y = np.array([1., 2., 6.])
        k = GPFit.kern.RBF(1)
        k.heuristic_fit(X, Y)
        np.testing.assert_allclose(k.variance.values, np.var(Y))
        np.testing.assert_allclose(k.lengthscale.values, 2.)

    def test_heuristic_fit_ARD(self):
        X = np.array([[0., 0.], [1., 4.], [3., 8.]])
        k = GPFit.kern.Matern52(2, ARD=True)
        k.heuristic_fit(X, np.zeros(3))
        # constant outputs keep the variance
        np.testing.assert_allclose(k.variance.values, 1.)
        np.testing.assert_allclose(k.lengthscale.values, [2., 16./3])


if __name__ == "__main__":
    unittest.main()
