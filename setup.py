from setuptools import setup, find_packages
import kaleido

setup(
  name              = "kaleido-repl",
  description       = "Kaleidoscope toy language interpreter & REPL",
  version           = kaleido.__version__,
  author            = "Felix C. Stegerman",
  author_email      = "flx@obfusk.net",
  license           = "GPLv3+",
  classifiers       = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
    "Topic :: Software Development :: Interpreters",
  ],
  keywords          = "kaleidoscope toy language repl interpreter",
  packages          = find_packages(include = ["kaleido"]),
  entry_points      = { "console_scripts": ["kaleido=kaleido:main_"] },
  python_requires   = ">=3.6",
  install_requires  = ["pyparsing>=3.0", "regex"],
  extras_require    = { "test": ["coverage", "pytest"] },
)
