# --                                                            ; {{{1
#
# File        : kaleido/eval.py
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
Evaluator: binds named units in a session and evaluates them.

All values are floats.

>>> from kaleido.read import parse
>>> s = Session()
>>> s.bind_and_evaluate("e0", parse("(1 + 2) * 3 < 10").node)
1.0
>>> "e0" in s, "e1" in s
(True, False)
>>> s.bind_and_evaluate("e1", parse("if 0 then 1 else -1").node)
-1.0
>>> try: s.bind_and_evaluate("e2", parse("y + 1").node)
... except D.EvalError as e: print(e)
unknown variable name: y
"""                                                             # }}}1

import math, operator, sys

from collections import namedtuple

from . import data as D

def putchard(x):
  """Print character with code x."""
  sys.stdout.write(chr(int(x))); return 0.0

def printd(x):
  """Print number x."""
  print("{:f}".format(x)); return 0.0

BUILTINS = {                                                    # {{{1
  "sin"       : (math.sin  , 1),
  "cos"       : (math.cos  , 1),
  "tan"       : (math.tan  , 1),
  "atan"      : (math.atan , 1),
  "exp"       : (math.exp  , 1),
  "log"       : (math.log  , 1),
  "sqrt"      : (math.sqrt , 1),
  "fabs"      : (math.fabs , 1),
  "pow"       : (math.pow  , 2),
  "putchard"  : (putchard  , 1),
  "printd"    : (printd    , 1),
}                                                               # }}}1

OPS = {
  "+": operator.add, "-": operator.sub, "*": operator.mul,
  "<": lambda x, y: float(x < y),
}

class Function(namedtuple("Function", "name params body".split())):
  """Bound function; body is a node or (extern) a callable."""
  def __repr__(self):
    return "<function {}({})>".format(
      self.name, " ".join( x.name for x in self.params ))

class Session:                                                  # {{{1
  """Session symbol namespace + evaluator."""

  def __init__(self, builtins = None):
    self.names    = {}
    self.builtins = dict(BUILTINS if builtins is None else builtins)

  def __contains__(self, name):
    return name in self.names

  def bind_and_evaluate(self, name, node, params = ()):         # {{{2
    """
    Bind node under name.  Definitions and externs evaluate to the
    bound Function; anything else is an (anonymous) expression: it's
    bound as a function w/o parameters and called.

    >>> s = Session()
    >>> d = D.ParameterDescriptor("x", None)
    >>> s.bind_and_evaluate("sqrt", D.Extern(None), (d,))
    <function sqrt(x)>
    >>> try: s.bind_and_evaluate("nope", D.Extern(None), (d,))
    ... except D.EvalError as e: print(e)
    unresolved extern: nope
    """

    params = tuple(params)
    if isinstance(node, D.Extern):
      return self._bind(name, params, self._extern(name, params))
    if isinstance(node, D.Definition):
      return self._bind(name, params, node.body)
    self._bind(name, params, node)
    try:
      return self.call(name, ())
    except RecursionError:
      raise D.EvalError("maximum recursion depth exceeded in " + name)
                                                                # }}}2

  def call(self, name, args):                                   # {{{2
    """Call bound function name with args."""
    f = self.names.get(name)
    if f is None:
      raise D.EvalError("unknown function referenced: " + name)
    if len(args) != len(f.params):
      raise D.EvalError(
        "incorrect number of arguments passed to {}: expected {}, "
        "got {}".format(name, len(f.params), len(args)))
    if callable(f.body):
      try:
        return float(f.body(*args))
      except (ValueError, OverflowError) as e:
        raise D.EvalError("{}: {}".format(name, e))
    env = dict(zip(( x.name for x in f.params ), args))
    return self.eval_(f.body, env)
                                                                # }}}2

  def eval_(self, node, env):                                   # {{{2
    """Evaluate expression node w/ local variables env."""
    if isinstance(node, D.Number):
      return node.value
    if isinstance(node, D.Ident):
      if node.name not in env:
        raise D.EvalError("unknown variable name: " + node.name)
      return env[node.name]
    if isinstance(node, D.Unary):
      return -self.eval_(node.operand, env)
    if isinstance(node, D.Binary):
      x, y = self.eval_(node.lhs, env), self.eval_(node.rhs, env)
      return OPS[node.op](x, y)
    if isinstance(node, D.Call):
      args = tuple( self.eval_(x, env) for x in node.args )
      return self.call(node.callee.name, args)
    if isinstance(node, D.If):
      if self.eval_(node.cond, env) != 0.0:
        return self.eval_(node.then, env)
      return self.eval_(node.else_, env)
    if isinstance(node, D.For):
      return self._loop(node, env)
    raise D.InternalError("cannot evaluate {!r}".format(node))
                                                                # }}}2

  def _loop(self, node, env):                                   # {{{2
    """
    Evaluate body, advance the variable, stop when the end condition
    (seen w/ the advanced variable) is false; yields 0.0.  NB: unlike
    the SSA version of the loop, which tests before incrementing, this
    is the mutable-variable form, so "i < 3" runs 0, 1, 2.

    >>> from kaleido.read import parse
    >>> s = Session()
    >>> _ = s.bind_and_evaluate("printd", D.Extern(None),
    ...                         (D.ParameterDescriptor("x", None),))
    >>> s.bind_and_evaluate("e", parse("for i = 0, i < 3 in printd(i)").node)
    0.000000
    1.000000
    2.000000
    0.0
    """

    var, missing  = node.var.name, object()
    old           = env.get(var, missing)
    env[var]      = self.eval_(node.start, env)
    try:
      while True:
        self.eval_(node.body, env)
        step = 1.0 if node.step is None else \
               self.eval_(node.step, env)
        env[var] += step
        if self.eval_(node.end, env) == 0.0: break
    finally:
      if old is missing: env.pop(var, None)
      else: env[var] = old
    return 0.0
                                                                # }}}2

  def _bind(self, name, params, body):
    names = [ x.name for x in params ]
    for x in names:
      if names.count(x) > 1:
        raise D.EvalError("duplicate parameter {} in {}".format(x, name))
    f = self.names[name] = Function(name, params, body)
    return f

  def _extern(self, name, params):
    if name not in self.builtins:
      raise D.EvalError("unresolved extern: " + name)
    fn, arity = self.builtins[name]
    if arity != len(params):
      raise D.EvalError("extern {} takes {} parameter(s), not {}"
                        .format(name, arity, len(params)))
    return fn
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
