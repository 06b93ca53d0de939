from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'serverconf',
    version = '0.1.0',
    description = 'Fail-fast validation of server startup parameters',
    packages = find_packages(exclude=['test', 'test.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov']
    },
    entry_points = {
        'console_scripts': ['serverconf-check = serverconf.__main__:main']
    }
)
