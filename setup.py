#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

PACKAGE_PATH = HERE / "jsonpatch_cli"


def get_version(path):
    with open(path) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    return match.group(1)


VERSION = get_version(PACKAGE_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='json-patch-cli',
      version=VERSION,
      description='Diff, apply and interactively edit JSON (RFC 6902) patches',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD-3-Clause',
      python_requires='>=3.8',
      packages=find_packages(include=['jsonpatch_cli', 'jsonpatch_cli.*']),
      package_data={'jsonpatch_cli.tests': ['files/*.json']},
      install_requires=[
          'colorama',
          'traitlets>=5',
          'watchdog>=2.1',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'json-patch = jsonpatch_cli.__main__:main_dispatch',
              'json-patch-diff = jsonpatch_cli.diffapp:main',
              'json-patch-apply = jsonpatch_cli.applyapp:main',
              'json-patch-edit = jsonpatch_cli.editapp:main',
          ],
      },
    )
