# --                                                            ; {{{1
#
# File        : kaleido/read.py
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
Reader: parses a buffer into exactly one top-level construct, and
tells "needs more input" apart from "can never be valid".

>>> parse("3+4")
Parsed(node=(3.0 + 4.0))
>>> parse("1 +")
Incomplete()
>>> parse("1 + ) 2").span
SourceSpan(start_line=1, start_col=5, end_line=1, end_col=6)
"""                                                             # }}}1

import sys

import pyparsing as P

from . import data as D
from . import misc as M

def _make_parser():                                             # {{{1
  # NB: "-" (instead of "+") once a construct has committed, so a
  # missing part is reported where it is missing; parse() relies on
  # that to tell incomplete input from invalid input.

  k, o, r, s  = P.Keyword, P.Optional, P.Regex, P.Suppress
  zm          = P.ZeroOrMore
  kw          = lambda x: s(k(x))                   # keyword
  n           = lambda x, name: x.set_name(name)    # name it

  expr, unary = P.Forward(), P.Forward()
  lpar, rpar  = s("("), s(")")

  number      = n(r(M.RX_NUMBER), "number").set_parse_action(_number)
  ident       = n(r(M.RX_IDENT), "identifier") \
                .set_parse_action(_ident)

  args        = o(expr + zm(s(",") - expr))
  call        = n(ident + lpar - args - rpar, "call") \
                .set_parse_action(_call)
  paren       = lpar - expr - rpar
  if_         = n(kw("if") - expr - kw("then") - expr -
                  kw("else") - expr, "if") \
                .set_parse_action(lambda t: [D.If(*t)])
  for_        = n(kw("for") - ident - s("=") - expr - s(",") - expr -
                  o(s(",") - expr) - kw("in") - expr, "for") \
                .set_parse_action(_for)

  primary     = number | call | ident | paren | if_ | for_
  unary      <<= n(P.Literal("-") - unary, "unary") \
                 .set_parse_action(lambda t: [D.Unary(*t)]) | primary

  binary      = lambda x, ops: (x + zm(P.one_of(ops) - x)) \
                                .set_parse_action(_fold)
  expr       <<= binary(binary(binary(unary, "*"), "+ -"), "<")

  proto       = n(ident - lpar - zm(ident) - rpar, "prototype") \
                .set_parse_action(lambda t: [D.Prototype(tuple(t))])
  define      = n(kw("def") - proto - expr, "definition") \
                .set_parse_action(lambda t: [D.Definition(*t)])
  extern      = n(kw("extern") - proto, "extern") \
                .set_parse_action(lambda t: [D.Extern(*t)])

  top         = (define | extern | expr) + o(s(";"))
  return top.ignore(r(M.RX_COMMENT)).parse_with_tabs()
                                                                # }}}1

def _number(s, loc, t):
  return [D.Number(float(t[0]), M.span(s, loc, loc + len(t[0])))]

def _ident(s, loc, t):
  return [D.Ident(t[0], M.span(s, loc, loc + len(t[0])))]

def _call(t):
  return [D.Call(t[0], tuple(t[1:]))]

def _for(t):
  step = t[3] if len(t) == 5 else None
  return [D.For(t[0], t[1], t[2], step, t[-1])]

def _fold(t):
  """Left-associative chain: x0 op x1 op x2 ..."""
  x = t[0]
  for i in range(1, len(t), 2):
    x = D.Binary(t[i], x, t[i+1])
  return [x]

_parser = _make_parser()

def parse(s):                                                   # {{{1
                                                                # {{{2
  r"""
  Parse a buffer: Parsed(node), INCOMPLETE or Invalid(message, span).

  >>> parse("1 + 2 * 3 < 4 - -x")
  Parsed(node=((1.0 + (2.0 * 3.0)) < (4.0 - -x)))
  >>> parse("def fib(x) if x < 3 then 1 else fib(x-1) + fib(x-2);")
  Parsed(node=def fib(x) (if (x < 3.0) then 1.0 else (fib((x - 1.0)) + fib((x - 2.0)))))
  >>> parse("for i = 1, i < n in putchard(42)")
  Parsed(node=(for i = 1.0, (i < n) in putchard(42.0)))
  >>> parse("extern sin(x)  # sine")
  Parsed(node=extern sin(x))
  >>> parse("def foo(a b)\n\n  a +\n  b")
  Parsed(node=def foo(a b) (a + b))

  >>> parse("def foo(a b)")
  Incomplete()
  >>> parse("def foo(a b)\n\n")
  Incomplete()
  >>> parse("foo(1,")
  Incomplete()
  >>> parse("(1 + 2")
  Incomplete()
  >>> parse("if x then 1")
  Incomplete()
  >>> parse("1 + # more to come")
  Incomplete()

  >>> x = parse("1 +\n)")
  >>> type(x).__name__, x.span
  ('Invalid', SourceSpan(start_line=2, start_col=1, end_line=2, end_col=2))
  >>> parse("3 4").span
  SourceSpan(start_line=1, start_col=3, end_line=1, end_col=4)
  >>> parse("def 42").span
  SourceSpan(start_line=1, start_col=5, end_line=1, end_col=6)
  >>> parse(M.ANON_PREFIX + "0").span
  SourceSpan(start_line=1, start_col=1, end_line=1, end_col=2)
  >>> parse("-" * 400 + "1")
  Invalid(message='expression nested too deeply', span=SourceSpan(start_line=1, start_col=1, end_line=1, end_col=2))
  """                                                           # }}}2

  try:
    t = _parser.parse_string(s, parse_all = True)
  except P.ParseBaseException as e:
    loc = min(e.loc, len(s))
    if M.at_end(s, loc): return D.INCOMPLETE
    return D.Invalid("{} (found {!r})".format(e.msg, s[loc]),
                     M.span(s, loc, loc + 1))
  except RecursionError:
    return D.Invalid("expression nested too deeply",
                     M.span(s, 0, min(1, len(s))))
  return D.Parsed(t[0])
                                                                # }}}1

def prototype(node):                                            # {{{1
  """
  Name and parameters of a callable definition (Definition, Extern or
  Prototype); the first identifier is the name, the rest are the
  parameters, in order.

  >>> p = prototype(parse("def foo(a b c) a").node)
  >>> p.name, [ x.name for x in p.params ]
  ('foo', ['a', 'b', 'c'])
  >>> p.params[1].span
  SourceSpan(start_line=1, start_col=11, end_line=1, end_col=12)
  >>> print(prototype(parse("extern sin(x)").node))
  sin(x)
  >>> try: prototype(D.Extern(D.Prototype(())))
  ... except D.InternalError as e: print(e)
  prototype without identifiers: extern ()
  """

  p = node if isinstance(node, D.Prototype) else node.prototype
  if not p.idents:
    raise D.InternalError(
      "prototype without identifiers: {!r}".format(node))
  name, params = p.idents[0], p.idents[1:]
  return D.PrototypeDescriptor(name.name, tuple(
    D.ParameterDescriptor(x.name, x.span) for x in params ))
                                                                # }}}1

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
