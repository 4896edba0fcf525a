# -*- coding: utf-8 -*-
import setuptools
import pathlib
import site
import sys

# odd bug with develop (editable) installs, see: https://github.com/pypa/pip/issues/7953
site.ENABLE_USER_SITE = "--user" in sys.argv[1:]

required = [
    "mashumaro[msgpack]",
    "pyzmq",
    "loguru",
    "setproctitle",
    "click>=8.0.0",
]

test_required = [
    "pytest",
    "pytest_asyncio>=0.24.0",
]

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

# Read version
version = {}
with open(here / "src/orion/_version.py", "r") as f:
    exec(f.read(), version)

if __name__ == "__main__":
    setuptools.setup(
        name="orion-logger",
        version=version["__version__"],
        author="Samuel Dolt",
        author_email="samuel@dolt.ch",
        description="Measurement logger: device and measurement parsing, flat-file storage.",
        long_description=long_description,
        long_description_content_type="text/markdown",
        url="http://orion.dolt.ch",
        keywords=[
            "measurement",
            "logger",
            "sensors",
            "data logging",
        ],
        classifiers=[
            "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
            "Development Status :: 2 - Pre-Alpha",
        ],
        license="GPLv3+",
        package_dir={"": "src"},
        packages=setuptools.find_packages(
            where="src",
            exclude=["*.test", "*.test.*", "test.*", "test", "test_*"],
        ),
        entry_points={
            "console_scripts": [
                "orion-logger=orion.cli:cli",
            ],
        },
        install_requires=required,
        extras_require={"test": test_required},
        python_requires=">= 3.11",
        setup_requires=["wheel"],  # force install of wheel first
    )
