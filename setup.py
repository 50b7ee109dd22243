#!/usr/bin/env python

from os.path import abspath, dirname, join

from setuptools import setup

with open(join(dirname(abspath(__file__)), 'utf8slice', 'version.py')) as version_file:
    exec(compile(version_file.read(), "version.py", 'exec'))

setup(name='utf8slice',
      version=version,  # noqa: F821
      description="Character-indexed, zero-copy slicing of UTF-8 encoded text",
      packages=['utf8slice', 'utf8slice.scripts'],
      # 3.8 and up, but not Python 4
      python_requires='~=3.8',
      install_requires=[
          'immutablecollections>=0.12.0',
          'attrs>=21.4.0',
          'PyYAML>=6.0',
          'typing_extensions>=4.6.0',
      ],
      extras_require={
          'test': ['pytest', 'hypothesis'],
      },
      package_data={'utf8slice': ['py.typed']},
      scripts=["utf8slice/scripts/slice_text.py"],
      classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ]
      )
