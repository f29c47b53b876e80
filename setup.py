#!/usr/bin/env python
"""
CrashLog
========

CrashLog is a Python client for `CrashLog <https://crashlog.io/>`_. It
captures exceptions raised by your application together with the context
you supply, and sends them to CrashLog for you to inspect.
"""

from setuptools import setup, find_packages
import re
import ast


_version_re = re.compile(r'VERSION\s+=\s+(.*)')

with open('crashlog/__init__.py', 'rb') as f:
    version = str(ast.literal_eval(_version_re.search(
        f.read().decode('utf-8')).group(1)))


install_requires = [
    'requests>=2.0',
]

tests_require = [
    'exam>=0.5.2',
    'flake8',
    'mock',
    'pytest',
    'pytest-cov',
    'responses',
]


setup(
    name='crashlog',
    version=version,
    author='CrashLog',
    author_email='support@crashlog.io',
    url='https://crashlog.io',
    description='CrashLog is a client for CrashLog (https://crashlog.io)',
    long_description=__doc__,
    packages=find_packages(exclude=("tests", "tests.*",)),
    zip_safe=False,
    python_requires='>=3.6',
    extras_require={
        'tests': tests_require,
    },
    license='BSD',
    install_requires=install_requires,
    include_package_data=True,
    classifiers=[
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python',
        'Topic :: Software Development',
    ],
)
