#!/usr/bin/env python
# -*- coding: utf-8 -*-

# ==============================================================================
# Copyright (c) 2024, GPFit authors (see AUTHORS.txt).
#
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice, this
#   list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of GPFit nor the names of its
#   contributors may be used to endorse or promote products derived from
#   this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
# ==============================================================================

import codecs
import os

from setuptools import find_packages, setup


def read(fname):
    with codecs.open(os.path.join(os.path.dirname(__file__), fname), 'r', 'latin') as f:
        return f.read()


desc = """

Fit the hyperparameters of Gaussian process regression models by gradient
ascent (ADAM) on the marginal log-likelihood, with a scale invariant variant
for kernels with an amplitude, and grow the training set sample by sample.

"""

version_dummy = {}
exec(read('src/GPFit/__version__.py'), version_dummy)
__version__ = version_dummy['__version__']
del version_dummy


setup(
        name='GPFit',
        version=__version__,
        author=read('AUTHORS.txt').strip(),
        description="Gaussian process regression with ADAM hyperparameter fitting",
        long_description=desc,
        license="BSD 3-clause",
        keywords="machine-learning gaussian-processes kernels",
        packages=find_packages('src'),
        package_dir={'': 'src'},
        package_data={'GPFit': ['defaults.cfg']},
        include_package_data=True,
        test_suite='GPFit.testing',
        python_requires='>=3.6',
        install_requires=[
            'numpy>=1.7',
            'scipy>=0.16',
            'paramz>=0.9.0'
        ],
        extras_require={
            'tests': [
                'pytest'
            ],
            'docs': [
                'sphinx'
            ],
        },
        classifiers=[
            'License :: OSI Approved :: BSD License',
            'Natural Language :: English',
            'Operating System :: MacOS :: MacOS X',
            'Operating System :: Microsoft :: Windows',
            'Operating System :: POSIX :: Linux',
            'Programming Language :: Python :: 3',
            'Intended Audience :: Science/Research',
            'Intended Audience :: Developers',
            'Topic :: Scientific/Engineering :: Mathematics',
            'Topic :: Software Development :: Libraries :: Python Modules'
        ],
        zip_safe=False
)
