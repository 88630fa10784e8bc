# --                                                            ; {{{1
#
# File        : kaleido/ready.py
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
Parse readiness: accumulates input lines until they form one complete
top-level construct (or a syntax error).

>>> t, events = ReadinessTracker(), []
>>> _ = t.subscribe(events.append)

A construct split across lines: one event when it becomes partial,
one when it's complete.

>>> t.feed("def foo(a b)")
'accumulating'
>>> t.feed("")
'accumulating'
>>> t.feed("a + b")
'complete'
>>> events
[ReadinessEvent(partial=True), ReadinessEvent(partial=False)]
>>> t.consume()
Parsed(node=def foo(a b) (a + b))
>>> t.state
'empty'

A single line is complete right away; no event.

>>> t.feed("3+4"), t.consume(), len(events)
('complete', Parsed(node=(3.0 + 4.0)), 2)

After a syntax error the buffer starts over.

>>> t.feed("1 +"), t.feed(")")
('accumulating', 'error')
>>> t.consume().span
SourceSpan(start_line=2, start_col=1, end_line=2, end_col=2)
>>> t.feed("2"), t.consume()
('complete', Parsed(node=2.0))
>>> events[2:]
[ReadinessEvent(partial=True), ReadinessEvent(partial=False)]
"""                                                             # }}}1

import logging, sys

from . import data as D
from . import misc as M
from . import read as R

log = logging.getLogger(__name__)

EMPTY, ACCUMULATING, COMPLETE, ERROR = \
  "empty accumulating complete error".split()

class ReadinessTracker:                                         # {{{1
  """
  Incremental parse-readiness state machine.

  Observers (see subscribe) get a ReadinessEvent whenever the partial
  classification changes.  The parse function must return Parsed,
  Incomplete or Invalid (see read.parse).
  """

  def __init__(self, parse = None):
    self.parse      = parse or R.parse
    self.observers  = []
    self.lines      = []
    self.state      = EMPTY
    self.outcome    = None

  @property
  def partial(self):
    return self.state == ACCUMULATING

  @property
  def buffer(self):
    return "\n".join(self.lines)

  def subscribe(self, f):
    """
    Register observer f (returns f, so it can be a decorator).

    Every observer sees every event.

    >>> t, xs, ys = ReadinessTracker(), [], []
    >>> _ = t.subscribe(xs.append); _ = t.subscribe(ys.append)
    >>> t.feed("1 +"), t.feed("2")
    ('accumulating', 'complete')
    >>> xs == ys == [D.PARTIAL, D.COMPLETE]
    True
    """
    self.observers.append(f); return f

  def feed(self, line):                                         # {{{2
    """
    Append line to the buffer and re-parse it; returns the new state.

    Blank lines are ignored while empty.

    >>> t = ReadinessTracker()
    >>> t.feed("  "), t.feed("# comment"), t.state
    ('empty', 'empty', 'empty')
    >>> t.feed("1")
    'complete'
    >>> try: t.feed("2")
    ... except D.InternalError as e: print(e)
    construct pending: 1

    Too deeply nested input is an error, and the next line starts over.

    >>> t = ReadinessTracker()
    >>> t.feed("(" * 200 + "1" + ")" * 200)
    'error'
    >>> t.consume().span
    SourceSpan(start_line=1, start_col=1, end_line=1, end_col=2)
    >>> t.feed("1"), t.consume()
    ('complete', Parsed(node=1.0))

    A line that can't be classified is not buffered.

    >>> t = ReadinessTracker(parse = lambda s: "bogus" if "?" in s else R.parse(s))
    >>> t.feed("foo(")
    'accumulating'
    >>> try: t.feed("?")
    ... except D.InternalError as e: print(e)
    bad parse outcome: 'bogus'
    >>> t.state, t.buffer, t.feed("1)")
    ('accumulating', 'foo(', 'complete')
    """

    if self.state in (COMPLETE, ERROR):
      raise D.InternalError("construct pending: " + self.buffer)
    if self.state == EMPTY and M.isblank(line):
      return self.state
    lines   = self.lines + [line]
    outcome = self.parse("\n".join(lines))
    if isinstance(outcome, D.Incomplete):
      state = ACCUMULATING
    elif isinstance(outcome, D.Invalid):
      state = ERROR
    elif isinstance(outcome, D.Parsed):
      state = COMPLETE
    else:
      raise D.InternalError("bad parse outcome: {!r}".format(outcome))
    self.lines, self.outcome = lines, outcome
    self._transition(state)
    return state
                                                                # }}}2

  def consume(self):                                            # {{{2
    """Take the complete (or erroneous) construct; clears the buffer."""
    if self.state not in (COMPLETE, ERROR):
      raise D.InternalError("nothing to consume in state " + self.state)
    outcome = self.outcome
    self.lines, self.outcome = [], None
    self._transition(EMPTY)
    return outcome
                                                                # }}}2

  def discard(self):                                            # {{{2
    """
    Drop any buffered input.

    >>> t, events = ReadinessTracker(), []
    >>> _ = t.subscribe(events.append)
    >>> t.feed("foo(")
    'accumulating'
    >>> t.discard()
    >>> t.state, t.buffer, events
    ('empty', '', [ReadinessEvent(partial=True), ReadinessEvent(partial=False)])
    """

    self.lines, self.outcome = [], None
    self._transition(EMPTY)
                                                                # }}}2

  def _transition(self, state):
    was, self.state = self.partial, state
    log.debug("%s (%d line(s) buffered)", state, len(self.lines))
    if self.partial != was:
      ev = D.PARTIAL if self.partial else D.COMPLETE
      for f in self.observers: f(ev)
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
