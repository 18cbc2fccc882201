#!/usr/bin/env python3
#
# Copyright (c)  2023  Xiaomi Corporation (author: Wei Kang)

import re

import setuptools


def get_package_version():
    with open("python/suffixsort/__init__.py") as f:
        content = f.read()

    latest_version = re.search(r"__version__ = (.*)", content).group(1)
    latest_version = latest_version.strip().strip('"').strip("'")
    return latest_version


setuptools.setup(
    name="suffixsort",
    version=get_package_version(),
    description="Linear time suffix array and LCP array construction",
    python_requires=">=3.7",
    package_dir={
        "suffixsort": "python/suffixsort",
    },
    packages=["suffixsort"],
    install_requires=["numpy"],
    extras_require={
        "test": ["pytest"],
    },
)
