"""Decompose XPath location paths into steps and compute with them.

This package exports the following names:
 * parse -- decompose an XPath expression into a :class:`PathInfo`
 * add_axis, join and contextualize -- build new path expressions out of
   decomposed ones
 * Step and PathInfo -- the decomposed representation
 * XPathError and its subclasses XPathSyntaxError and XPathStructureError

"""

__version_info__ = (1, 0, 0, None)

# Dot-connect all but the last. Last is dash-connected if not None.
__version__ = '.'.join(str(i) for i in __version_info__[:-1])
if __version_info__[-1] is not None:
    __version__ += ('-%s' % (__version_info__[-1],))

from xpathsteps.exceptions import *
from xpathsteps.steps import Step, PathInfo
from xpathsteps.decompose import parse
from xpathsteps.algebra import add_axis, join, contextualize
