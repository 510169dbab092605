"""
wktree
======

Parse, query, edit and re-serialize WKT coordinate reference system
definitions.
"""

from setuptools import find_packages, setup


setup(
    name='wktree',
    version='1.0.0',
    description='Navigable, editable WKT coordinate system definitions',
    long_description=__doc__,
    license='Apache 2.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'attrs',
        'click',
    ],
    python_requires='>=3.7.1',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wktree = wktree.cli:main',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Environment :: Console',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
    ]
)
