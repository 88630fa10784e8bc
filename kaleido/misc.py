# --                                                            ; {{{1
#
# File        : kaleido/misc.py
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
Lexical constants and helpers shared by the reader and the REPL.

>>> span("def foo(a b)\n  a", 15, 16)
SourceSpan(start_line=2, start_col=3, end_line=2, end_col=4)
"""                                                             # }}}1

import regex, sys

from . import data as D

                                                                # {{{1
KEYWORDS          = "def extern if then else for in".split()

RX_IDENT_BODY     = r"[a-zA-Z0-9]"
RX_KEYWORD        = "(?:" + "|".join(KEYWORDS) + ")(?!" \
                                       + RX_IDENT_BODY + ")"
RX_IDENT          = "(?!" + RX_KEYWORD + ")[a-zA-Z]" \
                                       + RX_IDENT_BODY + "*"
RX_IDENT_C        = regex.compile(RX_IDENT)

RX_NUMBER         = r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+"
RX_COMMENT        = r"#[^\n]*"
# NB: possessive, so a failed match is linear
RX_TRAILER_C      = regex.compile(r"(?:\s|" + RX_COMMENT + "+)*+")

# NB: user identifiers can't contain "_", so this never collides
ANON_PREFIX       = "__anon_expr"

PROMPT            = "ready> "
CONTINUE_PROMPT   = "...> "
                                                                # }}}1

def isident(s):                                                 # {{{1
  """
  Is the string a (non-keyword) identifier?

  >>> isident("foo42")
  True
  >>> isident("define")
  True
  >>> isident("def")
  False
  >>> isident("42foo")
  False
  >>> isident(ANON_PREFIX + "0")
  False
  """

  return bool(RX_IDENT_C.fullmatch(s))
                                                                # }}}1

def isblank(s):                                                 # {{{1
  """
  Is the line empty save for whitespace and comments?

  >>> isblank("")
  True
  >>> isblank("  # nothing to see here")
  True
  >>> isblank("  1 # one")
  False
  """

  return at_end(s, 0)
                                                                # }}}1

def at_end(s, loc):
  """Does nothing but whitespace and comments follow loc?"""
  return bool(RX_TRAILER_C.fullmatch(s, loc))

def position(s, loc):                                           # {{{1
  """
  Line and column (both 1-based) of character offset loc.

  >>> position("foo", 0)
  (1, 1)
  >>> position("1 +\\n)", 4)
  (2, 1)
  >>> position("1 +\\n)", 5)
  (2, 2)
  """

  return s.count("\n", 0, loc) + 1, loc - s.rfind("\n", 0, loc)
                                                                # }}}1

def span(s, start, end):
  """Source span from character offset start to (excl.) end."""
  return D.SourceSpan(*(position(s, start) + position(s, end)))

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
