from setuptools import setup, find_packages
import re

# Read version from benefitscalc/__init__.py
with open('benefitscalc/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='benefits-calc',
    version=version,
    packages=find_packages(include=['benefitscalc', 'benefitscalc.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'benefits-calc=benefitscalc.cli.__main__:main',
            'benefits-calc-mcp=benefitscalc.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Employee benefits administration and cost projection.',
    python_requires='>=3.10',
)
