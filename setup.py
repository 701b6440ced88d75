#!/usr/bin/env python3

# SPDX-FileCopyrightText: the properuri contributors
#
# SPDX-License-Identifier: MIT

import re
from pathlib import Path

from setuptools import setup, find_packages

# Not importing properuri.meta, as the package can not be assumed to be
# importable before it is installed
version = re.search(
    r'^version = "([^"]+)"',
    (Path(__file__).parent / "properuri" / "meta.py").read_text(encoding="utf8"),
    re.M,
).group(1)

setup(
    name="properuri",
    version=version,
    description="Strict RFC3986 percent-encoding of URIs and URI components",
    long_description=(Path(__file__).parent / "README.rst").read_text(encoding="utf8"),
    long_description_content_type="text/x-rst",
    license="MIT",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests"]),
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
