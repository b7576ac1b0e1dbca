from setuptools import find_packages, setup


setup(
    name = 'hofs',
    version = '0.0.1',
    description = 'Higher-order functions: map, filter, reduce, compose, curry',
    license = 'MIT',
    packages = find_packages(exclude=['tests*']),
)
