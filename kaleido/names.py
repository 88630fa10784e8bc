# --                                                            ; {{{1
#
# File        : kaleido/names.py
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
Names for anonymous top-level expressions.

>>> names = anonymous_names("expr")
>>> next(names), next(names), next(names)
('expr0', 'expr1', 'expr2')

Every call starts a new, independent sequence:

>>> other = anonymous_names("expr")
>>> next(other)
'expr0'
>>> next(names)
'expr3'

>>> import itertools
>>> xs = list(itertools.islice(anonymous_names("expr"), 1000))
>>> xs == [ "expr{}".format(i) for i in range(1000) ]
True
"""                                                             # }}}1

import itertools, sys

def anonymous_names(prefix):
  """Infinite generator of prefix0, prefix1, ..."""
  for i in itertools.count():
    yield prefix + str(i)

if __name__ == "__main__":
  import doctest
  if doctest.testmod()[0]: sys.exit(1)

# vim: set tw=70 sw=2 sts=2 et fdm=marker :
