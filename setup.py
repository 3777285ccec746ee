from setuptools import setup, find_namespace_packages

with open('requirements.txt') as f:
    REQUIREMENTS = f.read()

setup(
    name='gameshow',
    version='1.0.0',
    install_requires=REQUIREMENTS,
    extras_require={'test': ['pytest']},
    packages=find_namespace_packages(include=['gameshow*']),
    package_data={'gameshow': ['jsons/*/*.json']},
)
