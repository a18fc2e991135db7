#!/usr/bin/env python
# setup.py

"""
colnamelib setup file

To use:

    python setup.py sdist

    twine upload dist/*

To install in development mode:

    pip install -e .

To install with test requirements:

    pip install -e .[tests]

"""

from setuptools import setup, find_packages
from codecs import open
from os import path

from colnamelib.version_string import VERSION_STRING

PACKAGE_NAME = "colnamelib"
THIS_DIR = path.abspath(path.dirname(__file__))
README_FILE = path.join(THIS_DIR, 'README.rst')  # read


# =============================================================================
# Get the long description from the README file
# =============================================================================

with open(README_FILE, encoding='utf-8') as f:
    long_description = f.read()


# =============================================================================
# Specify requirements
# =============================================================================

REQUIREMENTS = [
    # - Include as few version requirements as possible.
    # - Keep it to pure-Python packages.

    "colorlog",
    "prettytable",
]

TEST_REQUIREMENTS = [
    "pytest",
]


# =============================================================================
# setup args
# =============================================================================

setup(
    name=PACKAGE_NAME,

    version=VERSION_STRING,

    description='Spreadsheet-style column names for signed 64-bit integers',
    long_description=long_description,

    # Choose your license
    license='Apache License 2.0',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',

        'Intended Audience :: Developers',

        'License :: OSI Approved :: Apache Software License',

        'Natural Language :: English',

        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',

        'Topic :: Software Development :: Libraries',
    ],

    keywords='spreadsheet column names',

    packages=find_packages(),  # finds all the .py files in subdirectories

    python_requires='>=3.7',

    install_requires=REQUIREMENTS,

    extras_require={
        'tests': TEST_REQUIREMENTS,
    },

    entry_points={
        'console_scripts': [
            # Format is 'script=module:function".
            'colnamelib_colnames=colnamelib.tools.colnames:main',
        ],
    },
)
