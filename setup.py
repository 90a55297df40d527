#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os

from setuptools import setup, find_packages

pkg_name = 'asstools'


def read_file(fname):
    with open(fname, 'r') as f:
        return f.read()


def read_version():
    for line in read_file(os.path.join(pkg_name, 'version.py')).splitlines():
        if line.startswith('__version__'):
            return line.split('=', 1)[1].strip().strip('\'"')
    raise RuntimeError('unable to find version string')


requirements = read_file('requirements.txt').strip().split()
setup(
    name=pkg_name,
    version=read_version(),
    description='Split and retime Advanced SubStation Alpha subtitle scripts.',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['docs', 'tests']),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'test': ['pytest', 'pysubs2'],
    },
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'ass-split = asstools.ass_split:main',
            'ass-time = asstools.ass_time:main',
        ],
    },
    license='MIT',
    zip_safe=False,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Video',
        'Topic :: Text Processing',
    ],
)
