#!/usr/bin/env python3

from setuptools import find_packages, setup

from pkgident import __version__

setup(
    name="pkgident",
    description="Package identity extraction",
    long_description="Command-line tool and library reading the name, "
    + "version and release of a package from its pspec.xml file.",
    version=__version__,
    python_requires=">=3.10",
    install_requires=["pyxdg", "ruamel.yaml"],
    extras_require={"test": ["pytest"]},
    license="Apache-2.0",
    platforms=["Linux"],
    keywords=["packaging", "pspec", "ypkg", "build"],
    packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
    entry_points={"console_scripts": ["pkgident = pkgident.main:main"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
        "Environment :: Console",
    ],
)
