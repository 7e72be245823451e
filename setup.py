#  -*- coding: utf-8 -*-
"""
Setuptools script for the lsupnp project.
"""

import os
from textwrap import fill, dedent

from setuptools import setup, find_packages


def required(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return [line for line in f.read().split('\n') if line.strip()]


setup(
    name="lsupnp",
    version="0.1.0",
    packages=find_packages(
        exclude=[
            "*.tests",
            "*.tests.*",
            "tests.*",
            "tests",
        ]
    ),
    scripts=[],
    include_package_data=True,
    install_requires=required('requirements.txt'),
    extras_require={
        'test': ['pytest', 'mock'],
    },
    entry_points={
        'console_scripts': [
            'lsupnp=lsupnp.cli:main',
        ],
    },
    python_requires='>=3.6',
    zip_safe=False,
    description=fill(dedent("""\
        Discover and list UPnP devices on the local network using SSDP.
    """)),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: POSIX",
        "Topic :: System :: Networking"
    ],
    license="MIT",
    keywords="upnp ssdp discovery",
)
