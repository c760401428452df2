# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from setuptools import setup
from Cython.Build import cythonize

modules = [\
    "base32e",
    "bigint",
    "consts",
    "mutil"\
]

ext_modules = cythonize(\
    [x + ".py" for x in modules],\
    compiler_directives={"language_level": "3"})

# Cython is required to build; without a C compiler the pure python
# modules are used.
for ext in ext_modules:
    ext.optional = True

setup(
    name = 'base32e',
    version = '1.0.0',
    description = 'Converts bytes to email names and back.',
    license = 'GPLv2',
    python_requires = '>=3.8',
    py_modules = modules + ["b32e", "llog"],
    ext_modules = ext_modules,
    extras_require = {"test": ["pytest"]},
    entry_points = {"console_scripts": ["b32e = b32e:main"]}
)
