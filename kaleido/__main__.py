# --                                                            ; {{{1
#
# File        : kaleido/__main__.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2017-12-03
#
# Copyright   : Copyright (C) 2017  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Command line interface: run a script, some code, or the REPL.

NB: examples are in the package docstring (pytest skips __main__.py).
"""                                                             # }}}1

import argparse, logging, os, sys

from . import __version__
from . import driver as DR
from . import repl as R

_me   = "kaleido"
_desc = "Kaleidoscope toy language interpreter & REPL"

def main(*args):                                                # {{{1
  """Main program."""
  p = _argument_parser(); n = p.parse_args(args); d = None
  if n.debug:
    logging.basicConfig(level = logging.DEBUG,
                        format = "%(name)s: %(levelname)s: %(message)s")
  if n.test: return test(verbose = n.verbose)
  if n.script or n.eval:
    try:
      d = DR.eval_file(n.script) if n.script else DR.eval_str(n.eval)
    except OSError as e:
      print("*** Error ***", e, file = sys.stderr); return 1
  if n.interactive or not (n.script or n.eval):
    if not sys.stdin.isatty() and not n.interactive:
      d = DR.eval_stream(sys.stdin, driver = d)
    else:
      R.repl(driver = d); return 0
  return 1 if d.failures else 0
                                                                # }}}1

def _argument_parser():                                         # {{{1
  p = argparse.ArgumentParser(description = _desc, prog = _me)
  g = p.add_mutually_exclusive_group()
  g.add_argument("script", metavar = "SCRIPT", nargs = "?",
                 help = "script to run")
  g.add_argument("--eval", "-e", metavar = "CODE",
                 help = "code to run (instead of a script)")
  p.add_argument("--interactive", "-i", action = "store_true",
                 help = "force interactive mode")
  p.add_argument("--version", action = "version",
                 version = "%(prog)s {}".format(__version__))
  p.add_argument("--test", action = "store_true",
                 help = "run tests (instead of the interpreter)")
  p.add_argument("--verbose", "-v", action = "store_true",
                 help = "run tests verbosely")
  p.add_argument("--debug", action = "store_true",
                 help = "log debug messages to stderr")
  return p
                                                                # }}}1

def test(verbose = False):                                      # {{{1
  """Run the doctests of the package and all its modules."""
  import doctest, importlib, pkgutil, unittest
  path  = os.path.dirname(os.path.abspath(__file__))
  names = [""] + [ "." + x.name for x in pkgutil.iter_modules([path]) ]
  suite = unittest.TestSuite(
    doctest.DocTestSuite(importlib.import_module("kaleido" + x))
    for x in names )
  runner = unittest.TextTestRunner(verbosity = 2 if verbose else 1)
  return 0 if runner.run(suite).wasSuccessful() else 1
                                                                # }}}1

def main_():
  """Entry point for main program."""
  return main(*sys.argv[1:])

if __name__ == "__main__":
  sys.exit(main_())

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
