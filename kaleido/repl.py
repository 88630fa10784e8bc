# --                                                            ; {{{1
#
# File        : kaleido/repl.py
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
Interactive console.

>>> lines, prompts = iter(["def inc(x)", "x + 1", "inc(41)"]), []
>>> def read(p):
...   prompts.append(p)
...   try: return next(lines)
...   except StopIteration: raise EOFError
>>> _ = repl(read = read)
Defined inc(x)
Evaluated to 42.0
<BLANKLINE>
>>> prompts
['ready> ', '...> ', 'ready> ', 'ready> ']

Ctrl-C drops the construct being entered; an internal error is
reported and only abandons its own line.

>>> from kaleido.read import parse
>>> def reader(*xs):
...   lines, prompts = iter(xs), []
...   def read(p):
...     prompts.append(p)
...     x = next(lines, EOFError())
...     if isinstance(x, BaseException): raise x
...     return x
...   return read, prompts
>>> read, prompts = reader("foo(", KeyboardInterrupt(), "2")
>>> _ = repl(read = read)
<BLANKLINE>
Evaluated to 2.0
<BLANKLINE>
>>> prompts
['ready> ', '...> ', 'ready> ', 'ready> ']
>>> bogus = lambda s: "bogus" if "?" in s else parse(s)
>>> read, prompts = reader("1 +", "?", "2")
>>> _ = repl(DR.Driver(parse = bogus), read = read)
*** Internal error *** bad parse outcome: 'bogus'
Evaluated to 3.0
<BLANKLINE>
>>> prompts
['ready> ', '...> ', '...> ', 'ready> ']
"""                                                             # }}}1

import logging, sys

from . import data as D
from . import driver as DR
from . import misc as M

log = logging.getLogger(__name__)

def prompt(s = M.PROMPT): return input(s)

def repl(driver = None, read = None):                           # {{{1
  """
  Read-Eval-Print loop.  Lines are accumulated until they form a
  complete construct; the prompt tells which is the case.  Returns
  the driver (i.e. the session).
  """

  if driver is None: driver = DR.Driver()
  if read is None:
    read = prompt
    if sys.stdin.isatty():
      try:
        import readline
      except ImportError:
        pass
  current = M.PROMPT

  def switch(ev):
    nonlocal current
    current = M.CONTINUE_PROMPT if ev.partial else M.PROMPT
  driver.subscribe(switch)

  while True:
    try:
      line = read(current)
    except EOFError:
      DR.report(driver.finish()); print(); break
    except KeyboardInterrupt:
      print(); driver.discard(); continue
    try:
      DR.report(driver.feed(line))
    except D.InternalError as e:
      log.exception("internal error")
      print("*** Internal error ***", e)
  return driver
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
