#!/usr/bin/env python3

from setuptools import setup

setup(
    author = "Aleksey Knyazev",
    author_email = "ctj_yebbs@inbox.ru",
    description = "Typed parser for APT Release, control and Packages files",
    license = "GPL",
    name = "apt_parser",
    packages = ["apt_parser"],
    version = "1.0.0",
    python_requires = ">=3.7.0",
    install_requires = [
        "requests"
    ],
    extras_require = {
        "test": [
            "pytest"
        ]
    },
    entry_points = {
        "console_scripts": [
            "apt-parser = apt_parser.__main__:main"
        ]
    }
)
