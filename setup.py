#!/usr/bin/env python

from setuptools import setup, find_packages
import os

# Determine package version
VERSION = '0.1.0'

# Package metadata
DISTNAME = "gorot"
DESCRIPTION = "Gradient Projection Rotation of Factor Loadings"
LONG_DESCRIPTION = (
    open('README.md', 'r', encoding='utf8').read()
    if os.path.exists('README.md') else DESCRIPTION
)
LICENSE = "BSD-3-Clause"
KEYWORDS = "factor analysis, rotation, varimax, oblimin, gradient projection"

# Package data specification
PACKAGE_DATA = {
    'gorot': [
        '_gorlog.yml',
    ],
}

setup_kwargs = {
    'packages': find_packages(exclude=["*.tests", "*.tests.*"]),
    'install_requires': [
        "numpy>=1.21",
        "scipy>=1.9.0",
        "scikit-learn>=1.2.0",
        "pandas>=1.4",
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
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
    ],
    keywords=KEYWORDS,
    zip_safe=True,
    package_data=PACKAGE_DATA,
    **setup_kwargs
)
