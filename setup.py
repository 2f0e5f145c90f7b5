#!/usr/bin/env python

import os
from setuptools import setup, find_packages

# Determine package version
VERSION = '0.1.0'
with open(os.path.join('gofactor', '__init__.py'), 'r', encoding='utf8') as f:
    for line in f:
        if line.startswith('__version__'):
            VERSION = line.split('=')[1].strip().strip('"\'')
            break

# Package metadata
DISTNAME = "gofactor"
DESCRIPTION = "Principal component factor analysis: loadings, scores and eigenvalues"
LONG_DESCRIPTION = open('README.md', 'r', encoding='utf8').read()
MAINTAINER = "Laurent Kouadio"
MAINTAINER_EMAIL = 'etanoyau@gmail.com'
LICENSE = "BSD-3-Clause"
KEYWORDS = "factor analysis, principal component analysis, eigen decomposition"

# Package data specification
PACKAGE_DATA = {
    'gofactor': [
        '_gflog.yml',
    ],
}

setup_kwargs = {
    'packages': find_packages(),
    'install_requires': [
        "numpy>=1.23",
        "scipy>=1.9.0",
        "scikit-learn>=1.3",
        "pyyaml>=5.0.0",
        "packaging",
    ],
    'extras_require': {
        "dev": [
            "pytest",
        ]
    },
    'python_requires': '>=3.9'
}

setup(
    name=DISTNAME,
    version=VERSION,
    author=MAINTAINER,
    author_email=MAINTAINER_EMAIL,
    maintainer=MAINTAINER,
    maintainer_email=MAINTAINER_EMAIL,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license=LICENSE,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    keywords=KEYWORDS,
    zip_safe=True,
    package_data=PACKAGE_DATA,
    **setup_kwargs
)
