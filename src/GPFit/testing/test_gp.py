# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
# Licensed under the BSD 3-clause license (see LICENSE.txt)

import unittest
import numpy as np
from scipy import stats
import GPFit


class GPTests(unittest.TestCase):
    def setUp(self):
        rng = np.random.RandomState(42)
        self.true_noise = 0.1
        self.X = np.linspace(0., 10., 20)
        self.Y = np.sin(self.X) + rng.normal(0., self.true_noise, 20)

    def test_end_to_end(self):
        """
        The fit of the noise converges before the maximum number of
        iterations to the magnitude of the injected noise. The RBF kernel is
        scalable, so the noise follows the optimal amplitude.
        """
        m = GPFit.models.GPRegression(self.X, self.Y)
        ll = m.log_likelihood()
        m.fit_parameters(fit_prior=True, fit_kernel=True, max_iters=100, convergence_fraction=0.05)
        opt = m.optimization_runs[-1]
        self.assertTrue(opt.scaled)
        self.assertLess(opt.iterations, 100)
        self.assertGreater(m.noise, self.true_noise/10.)
        self.assertLess(m.noise, self.true_noise*10.)
        self.assertGreater(m.log_likelihood(), ll)

    def test_fit_parameters(self):
        m = GPFit.core.GP(self.X, self.Y, GPFit.kern.RBF(1, lengthscale=5.), mean_function=GPFit.mappings.Constant(1), noise=0.5)
        ll = m.log_likelihood()
        m.fit_parameters(fit_prior=True, fit_kernel=True, max_iters=100, convergence_fraction=0.05)
        np.testing.assert_allclose(m.mean_function.C.values, np.mean(self.Y))
        np.testing.assert_allclose(m.Y, self.Y - np.mean(self.Y))
        self.assertTrue(m.optimization_runs[-1].scaled)
        self.assertGreater(m.log_likelihood(), ll)

    def test_fit_parameters_prior_only(self):
        m = GPFit.core.GP(self.X, self.Y, GPFit.kern.RBF(1), mean_function=GPFit.mappings.Linear(1), noise=0.5)
        params = m.kern.get_parameters()
        m.fit_parameters(fit_prior=True, fit_kernel=False)
        self.assertEqual(len(m.optimization_runs), 0)
        np.testing.assert_array_equal(m.kern.get_parameters(), params)
        slope, intercept = np.polyfit(self.X, self.Y, 1)
        np.testing.assert_allclose(m.mean_function.A.values, [intercept, slope], rtol=1e-6, atol=1e-10)

    def test_log_likelihood(self):
        k = GPFit.kern.Matern32(1, lengthscale=2.)
        m = GPFit.core.GP(self.X, self.Y, k, noise=0.3)
        cov = k.K(self.X[:, None]) + 0.09*np.eye(20)
        np.testing.assert_allclose(m.log_likelihood(), stats.multivariate_normal(np.zeros(20), cov).logpdf(self.Y))

    def test_add_samples(self):
        k = GPFit.kern.RBF(1)
        m = GPFit.core.GP(self.X[:5], self.Y[:5], k, noise=0.2)
        m.add_samples(self.X[5:12], self.Y[5:12])
        m.add_samples(self.X[12:, None], self.Y[12:])
        full = GPFit.core.GP(self.X, self.Y, k.copy(), noise=0.2)
        self.assertEqual(m.num_data, 20)
        np.testing.assert_array_equal(m.X, full.X)
        np.testing.assert_array_equal(m.Y, full.Y)
        np.testing.assert_allclose(m.L, full.L)
        np.testing.assert_allclose(m.log_likelihood(), full.log_likelihood())

    def test_add_samples_wrong_dimension(self):
        m = GPFit.core.GP(self.X, self.Y, GPFit.kern.RBF(1))
        with self.assertRaises(AssertionError):
            m.add_samples(np.zeros((2, 2)), np.zeros(2))
        with self.assertRaises(AssertionError):
            m.add_samples(np.zeros(2), np.zeros(3))

    def test_wrong_input_dim(self):
        with self.assertRaises(AssertionError):
            GPFit.core.GP(self.X, self.Y, GPFit.kern.RBF(2))

    def test_predict_training_points(self):
        X = np.array([0., 2., 4., 6., 8.])
        Y = np.array([1., -1., 0.5, 2., 0.])
        m = GPFit.models.GPRegression(X, Y, kernel=GPFit.kern.RBF(1), noise=1e-4)
        np.testing.assert_allclose(m.predict_mean(X), Y, atol=1e-4)
        self.assertTrue(np.all(m.predict_variance(X) < 1e-6))
        mu, var = m.predict(X)
        np.testing.assert_allclose(var, m.predict_variance(X) + 1e-8)

    def test_predict_far_away(self):
        X = np.array([0., 2., 4., 6., 8.])
        Y = np.array([1., -1., 0.5, 2., 0.])
        m = GPFit.models.GPRegression(X, Y, kernel=GPFit.kern.RBF(1, variance=2.))
        Xfar = np.array([[100.], [200.]])
        # back to the prior: the constant mean and the kernel variance
        np.testing.assert_allclose(m.predict_mean(Xfar), np.mean(Y))
        np.testing.assert_allclose(m.predict_variance(Xfar), 2.)
        np.testing.assert_allclose(m.predict_covariance(Xfar), 2.*np.eye(2), atol=1e-12)

    def test_predict_full_cov(self):
        m = GPFit.core.GP(self.X, self.Y, GPFit.kern.RBF(1), noise=0.1)
        Xnew = np.linspace(-1., 11., 7)[:, None]
        mu, cov = m.predict(Xnew, full_cov=True, include_likelihood=False)
        mu_diag, var = m.predict(Xnew, include_likelihood=False)
        np.testing.assert_allclose(mu, mu_diag)
        np.testing.assert_allclose(np.diag(cov), var, atol=1e-12)
        np.testing.assert_allclose(cov, m.predict_covariance(Xnew))

    def test_posterior_samples(self):
        m = GPFit.core.GP(self.X, self.Y, GPFit.kern.RBF(1), noise=0.1)
        Xnew = np.array([[1.], [5.], [9.]])
        samples = m.posterior_samples_f(Xnew, size=2000, rng=np.random.default_rng(0))
        self.assertEqual(samples.shape, (3, 2000))
        mu, var = m.predict(Xnew, include_likelihood=False)
        np.testing.assert_allclose(samples.mean(1), mu, atol=5*np.sqrt(var.max()/2000) + 1e-3)

    def test_default_noise(self):
        m = GPFit.models.GPRegression(self.X, self.Y)
        np.testing.assert_allclose(m.noise, GPFit.util.config.config.getfloat('model', 'noise_fraction')*np.std(self.Y))
        self.assertIn("GP regression", str(m))


if __name__ == "__main__":
    unittest.main()
