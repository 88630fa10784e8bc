# --                                                            ; {{{1
#
# File        : kaleido/driver.py
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
REPL driver: feeds lines to the readiness tracker, names completed
constructs and hands them to the evaluator.

>>> d, events = Driver(), []
>>> _ = d.subscribe(events.append)
>>> d.feed("def foo(a b)")
>>> d.feed("")
>>> out = d.feed("a*b + 1")
>>> print(show(out))
Defined foo(a b)
>>> [ x.name for x in out.value.params ]
['a', 'b']

A bare expression is complete on its own and gets an anonymous name.

>>> out = d.feed("3+4")
>>> out.name, out.value
('__anon_expr0', 7.0)
>>> events
[ReadinessEvent(partial=True), ReadinessEvent(partial=False)]
>>> d.feed("foo(2, 3)")
Evaluated(name='__anon_expr1', node=foo(2.0, 3.0), value=7.0)

Errors are reported; the session carries on.

>>> print(show(d.feed("foo(2)")))
*** Error *** incorrect number of arguments passed to foo: expected 2, got 1
>>> out = d.feed("foo(2 3)")
>>> out.name, out.error.span
(None, SourceSpan(start_line=1, start_col=7, end_line=1, end_col=8))
>>> d.feed("foo(1, 1)").name, d.failures
('__anon_expr3', 2)

>>> _ = eval_str('''
... def fib(x)
...   if x < 3 then
...     1
...   else
...     fib(x-1) + fib(x-2)
... fib(10)
... ''')
Defined fib(x)
Evaluated to 55.0
"""                                                             # }}}1

import logging, sys

from . import data as D
from . import eval as E
from . import misc as M
from . import names as N
from . import read as R
from . import ready as T

log = logging.getLogger(__name__)

class Driver:                                                   # {{{1
  """
  Owns one readiness tracker, one traversal of anonymous names and
  the session everything is bound in.  Processes one line at a time.
  """

  def __init__(self, session = None, parse = None,
               prefix = M.ANON_PREFIX):
    self.session  = E.Session() if session is None else session
    self.tracker  = T.ReadinessTracker(parse)
    self.names    = N.anonymous_names(prefix)
    self.failures = 0

  @property
  def partial(self):
    return self.tracker.partial

  def subscribe(self, f):
    """Register readiness observer f."""
    return self.tracker.subscribe(f)

  def feed(self, line):                                         # {{{2
    """
    Process one line of input; returns None while more input is
    needed, otherwise Evaluated or Failed.
    """

    state = self.tracker.feed(line)
    if state not in (T.COMPLETE, T.ERROR): return None
    outcome = self.tracker.consume()
    if state == T.ERROR:
      return self._failed(None, D.ParseError(*outcome))
    return self.evaluate(outcome.node)
                                                                # }}}2

  def evaluate(self, node):                                     # {{{2
    """
    Bind a complete construct (definitions under their declared name,
    expressions under the next anonymous name) and evaluate it.
    """

    if isinstance(node, D.CALLABLES):
      proto         = R.prototype(node)
      name, params  = proto.name, proto.params
    else:
      name, params  = self._anonymous_name(), ()
    log.debug("binding %s", name)
    try:
      value = self.session.bind_and_evaluate(name, node, params)
    except D.EvalError as e:
      return self._failed(name, e)
    return D.Evaluated(name, node, value)
                                                                # }}}2

  def finish(self):                                             # {{{2
    """
    End of input; a pending partial construct is a syntax error.

    >>> d = Driver()
    >>> d.feed("foo(1,")
    >>> print(show(d.finish()))
    *** Syntax error *** unexpected end of input (line 1, col 7)
    >>> d.finish() is None
    True
    """

    if not self.partial: return None
    buf = self.tracker.buffer
    self.tracker.discard()
    sp = M.span(buf, len(buf), len(buf))
    return self._failed(None, D.ParseError("unexpected end of input", sp))
                                                                # }}}2

  def discard(self):
    """Drop the construct being entered."""
    self.tracker.discard()

  def _anonymous_name(self):
    name = next(self.names)
    while name in self.session:
      log.warning("anonymous name %s already bound; skipping", name)
      name = next(self.names)
    return name

  def _failed(self, name, error):
    self.failures += 1
    log.debug("failed: %s", error)
    return D.Failed(name, error)
                                                                # }}}1

def show(outcome):                                              # {{{1
  """Describe the outcome of a construct."""
  if isinstance(outcome, D.Failed):
    e = outcome.error
    if isinstance(e, D.ParseError):
      return "*** Syntax error *** {} ({})".format(e.message, e.span)
    return "*** Error *** {}".format(e)
  if isinstance(outcome.node, D.Definition):
    return "Defined {}".format(R.prototype(outcome.node))
  if isinstance(outcome.node, D.Extern):
    return "Declared extern {}".format(R.prototype(outcome.node))
  return "Evaluated to {!r}".format(outcome.value)
                                                                # }}}1

def report(outcome, file = None):
  """Print the outcome of a construct (if any)."""
  if outcome is not None: print(show(outcome), file = file or sys.stdout)

def eval_stream(s, driver = None):                              # {{{1
  """Evaluate lines from an iterable; returns the driver."""
  if driver is None: driver = Driver()
  for line in s:
    report(driver.feed(line.rstrip("\n")))
  report(driver.finish())
  return driver
                                                                # }}}1

def eval_str(s, driver = None):
  """
  Evaluate string.

  >>> _ = eval_str("extern printd(x)\\nprintd(42)")
  Declared extern printd(x)
  42.000000
  Evaluated to 0.0
  """
  return eval_stream(s.splitlines(), driver = driver)

def eval_file(name, driver = None):
  """Evaluate file contents."""
  with open(name) as f:
    return eval_stream(f, driver = driver)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
