from setuptools import setup, find_packages

import re
version_match = re.search(r"^__version__\s*=\s*['\"]([^'\"]*)['\"]",
                          open('metainfo/__init__.py').read(), re.M)
if version_match:
    __version__ = version_match.group(1)
else:
    raise RuntimeError("Unable to find __version__")

try:
    long_description = open('README.rst').read()
except OSError:
    long_description = ''

setup(
    name               = 'metainfo',
    version            = __version__,
    license            = 'GPLv3+',
    packages           = find_packages(exclude=['tests']),
    package_data       = {'metainfo': ['__init__.pyi']},
    python_requires    = '>=3.6, ==3.*',
    install_requires   = ['flatbencode==0.2.*'],
    extras_require     = {'test': ['pytest']},
    entry_points       = {'console_scripts': ['metainfo = metainfo.__main__:main']},

    description        = 'Python 3 module for decoding torrent metainfo into typed structures',
    long_description   = long_description,
    keywords           = 'bittorrent torrent metainfo bencode',

    classifiers        = [
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
    ]
)
