# --                                                            ; {{{1
#
# File        : kaleido/data.py
# Maintainer  : Felix C. Stegerman <flx@obfusk.net>
# Date        : 2017-12-02
#
# Copyright   : Copyright (C) 2017  Felix C. Stegerman
# Version     : v0.1.0
# License     : GPLv3+
#
# --                                                            ; }}}1

                                                                # {{{1
r"""
Errors, source spans, descriptors, syntax tree nodes, parse outcomes
and readiness events.

>>> sp = SourceSpan(1, 9, 1, 10)
>>> print(sp)
line 1, col 9
>>> p = PrototypeDescriptor("foo", (ParameterDescriptor("a", sp),))
>>> print(p)
foo(a)

>>> Definition(Prototype((Ident("foo", None), Ident("x", None))),
...            Binary("*", Ident("x", None), Number(2.0, None)))
def foo(x) (x * 2.0)
>>> If(Ident("c", None), Number(1.0, None), Unary("-", Number(1.0, None)))
(if c then 1.0 else -1.0)
"""                                                             # }}}1

import sys

from collections import namedtuple

# === Exceptions ===

class KaleidoError(Exception):
  """Base class for kaleido errors"""

class ParseError(KaleidoError):                                 # {{{1
  """Syntax error in user input."""
  def __init__(self, message, span):
    super().__init__(message)
    self.message, self.span = message, span
                                                                # }}}1

class EvalError(KaleidoError):
  """Evaluation failed."""

class InternalError(KaleidoError):
  """Broken contract between components (not a user error)."""

# === Source Spans & Descriptors ===

class SourceSpan(namedtuple("SourceSpan",
    "start_line start_col end_line end_col".split())):
  """Source span; 1-based lines and columns, end exclusive."""
  def __str__(self):
    return "line {}, col {}".format(self.start_line, self.start_col)

class ParameterDescriptor(namedtuple("ParameterDescriptor",
                                     "name span".split())):
  """Formal parameter of a callable."""

class PrototypeDescriptor(namedtuple("PrototypeDescriptor",
                                     "name params".split())):
  """Name and (ordered) parameters of a callable."""
  def __str__(self):
    return "{}({})".format(self.name,
                           " ".join( x.name for x in self.params ))

# === Syntax Tree ===

class Number(namedtuple("Number", "value span".split())):
  """Number literal."""
  def __repr__(self): return repr(self.value)

class Ident(namedtuple("Ident", "name span".split())):
  """Identifier (variable reference or prototype name/parameter)."""
  def __repr__(self): return self.name

class Unary(namedtuple("Unary", "op operand".split())):
  """Unary operator."""
  def __repr__(self): return self.op + repr(self.operand)

class Binary(namedtuple("Binary", "op lhs rhs".split())):
  """Binary operator."""
  def __repr__(self):
    return "({!r} {} {!r})".format(self.lhs, self.op, self.rhs)

class Call(namedtuple("Call", "callee args".split())):
  """Function call."""
  def __repr__(self):
    return "{}({})".format(self.callee.name,
                           ", ".join(map(repr, self.args)))

class If(namedtuple("If", "cond then else_".split())):
  """Conditional."""
  def __repr__(self):
    return "(if {!r} then {!r} else {!r})".format(*self)

class For(namedtuple("For", "var start end step body".split())):
  """Loop; step is None when omitted."""
  def __repr__(self):
    step = "" if self.step is None else ", {!r}".format(self.step)
    return "(for {} = {!r}, {!r}{} in {!r})".format(
      self.var.name, self.start, self.end, step, self.body)

class Prototype(namedtuple("Prototype", "idents".split())):
  """Identifier list of a prototype: name, then parameters."""
  def __repr__(self):
    names = [ x.name for x in self.idents ]
    return "{}({})".format("".join(names[:1]), " ".join(names[1:]))

class Definition(namedtuple("Definition", "prototype body".split())):
  """Function definition."""
  def __repr__(self):
    return "def {!r} {!r}".format(self.prototype, self.body)

class Extern(namedtuple("Extern", "prototype".split())):
  """External function declaration."""
  def __repr__(self): return "extern {!r}".format(self.prototype)

# nodes bound under their declared name
CALLABLES = (Definition, Extern)

# === Parse Outcomes ===

class Parsed(namedtuple("Parsed", "node".split())):
  """Buffer holds exactly one complete top-level construct."""

class Incomplete(namedtuple("Incomplete", ())):
  """Buffer is a valid prefix of some larger construct."""

class Invalid(namedtuple("Invalid", "message span".split())):
  """Buffer can't become valid by appending more input."""

INCOMPLETE = Incomplete()

# === Driver Outcomes ===

class Evaluated(namedtuple("Evaluated", "name node value".split())):
  """Construct bound under name and evaluated."""

class Failed(namedtuple("Failed", "name error".split())):
  """Syntax error (name is None) or evaluation failure."""

# === Readiness Events ===

class ReadinessEvent(namedtuple("ReadinessEvent", "partial".split())):
  """
  Partial vs. complete classification changed.

  >>> ReadinessEvent(True) == PARTIAL, PARTIAL.partial
  (True, True)
  >>> COMPLETE
  ReadinessEvent(partial=False)
  """

PARTIAL, COMPLETE = ReadinessEvent(True), ReadinessEvent(False)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
