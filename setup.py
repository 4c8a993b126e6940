# Copyright Jay Conrod. All rights reserved.
#
# This file is part of Levels. Use of this source code is governed by
# the GPL license that can be found in the LICENSE.txt file.


from setuptools import setup, find_packages

setup(
    name="levels",
    version="0",
    description="Expression parsers assembled from precedence levels",
    long_description="A parser combinator library for composing layered, " +
                     "precedence-ordered expression grammars",
    author="Jay Conrod",
    author_email="jayconrod@gmail.com",
    license="GPLv3",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Compilers",
    ],
    keywords="parser combinators expression precedence",
    packages=find_packages(include=["levels", "levels.*"]),
    package_data={
        "levels": [
            "arithmetic.yaml",
        ],
    },
    install_requires=[
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "levels-calc=levels.calculator:main",
        ],
    },
)
