import os
import re

from setuptools import setup

# fullsplit and packages calculation inspired by django setup.py

def fullsplit(path):
    result = []
    while path:
        path, tail = os.path.split(path)
        result.append(tail)
    result.reverse()
    return result

src_dir = 'src'
packages = []
for path, dirs, files in os.walk(src_dir):
    if '__pycache__' in dirs:
        dirs.remove('__pycache__')
    if '__init__.py' in files:
        packages.append('.'.join(fullsplit(os.path.relpath(path, src_dir))))

# read the version without importing the package, which needs ply
init_py = os.path.join(src_dir, 'xpathsteps', '__init__.py')
with open(init_py) as init_file:
    version_info = re.search(r'^__version_info__ = \((.*)\)$',
                             init_file.read(), re.M).group(1)
parts = [part.strip() for part in version_info.split(',')]
__version__ = '.'.join(parts[:-1])
if parts[-1] != 'None':
    __version__ += '-%s' % (parts[-1].strip('\'"'),)

setup(
    name='xpathsteps',
    version=__version__,
    description='Decompose XPath location paths into steps and rewrite them '
                'relative to one another',
    packages=packages,
    package_dir={'': src_dir},
    python_requires='>=3.7',
    install_requires=[
        'ply',
    ],
    extras_require={
        'test': [
            'pytest',
            'lxml',
            'unittest-xml-reporting',
        ],
        'doc': [
            'sphinx',
        ],
    },
)
