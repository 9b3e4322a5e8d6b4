# -*- coding: utf-8 -*-
#
import os
from setuptools import setup
import codecs

# https://packaging.python.org/single_source_version/
base_dir = os.path.abspath(os.path.dirname(__file__))
about = {}
with open(os.path.join(base_dir, 'sinedft', '__about__.py'), 'rb') as f:
    exec(f.read(), about)


def read(fname):
    return codecs.open(os.path.join(os.path.dirname(__file__), fname),
                       encoding='utf-8'
                       ).read()

setup(name='sinedft',
      packages=['sinedft'],
      version=about['__version__'],
      description='Frequency bins of a sampled sine wave via the DFT',
      long_description=read('README.md'),
      long_description_content_type='text/markdown',
      author=about['__author__'],
      author_email=about['__author_email__'],
      url='https://github.com/nschloe/sinedft/',
      install_requires=[
          'numpy',
          'scipy',
          ],
      extras_require={
          'test': ['pytest', 'sympy'],
          },
      entry_points={
          'console_scripts': [
              'sinedft = sinedft.cli:main',
              ],
          },
      classifiers=[
          about['__status__'],
          'Intended Audience :: Science/Research',
          about['__license__'],
          'Operating System :: OS Independent',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          'Topic :: Scientific/Engineering :: Mathematics'
          ],
      )
