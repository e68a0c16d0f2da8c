import os
import re

from setuptools import find_packages, setup

ROOT = os.path.dirname(os.path.abspath(__file__))


def read_version():
    init_py = os.path.join(ROOT, "src", "dagkit", "__init__.py")
    with open(init_py) as f:
        match = re.search(r'^__version__ = "([^"]+)"$', f.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError("failed to read package version")
    return match.group(1)


# Metadata and extras live in setup.cfg; only the dynamic bits are here.
setup(
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"": ["LICENSE*", "README*"]},
    version=read_version(),
)
