# --                                                            ; {{{1
#
# File        : kaleido/__init__.py
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
kaleido - Kaleidoscope toy language interpreter & REPL

>>> from kaleido.driver import eval_str
>>> _ = eval_str("def sq(x) x*x\nsq(sq(3))")
Defined sq(x)
Evaluated to 81.0

Command line (see __main__):

>>> from kaleido.__main__ import main
>>> main("-e", "extern sqrt(x)\n\nsqrt(16)")
Declared extern sqrt(x)
Evaluated to 4.0
0
>>> main("-e", "sqrt(")
*** Syntax error *** unexpected end of input (line 1, col 6)
1
"""                                                             # }}}1

__version__ = "0.1.0"

def main_():
  """Entry point for main program."""
  from .__main__ import main_
  return main_()

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
