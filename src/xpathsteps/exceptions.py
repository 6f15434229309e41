# file xpathsteps\exceptions.py
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.

__all__ = ['XPathError', 'XPathSyntaxError', 'XPathStructureError']

class XPathError(Exception):
    "Base class for all errors raised while handling XPath expressions."

class XPathSyntaxError(XPathError):
    """The expression could not be lexed or parsed.

    :param message: description of the problem
    :param text: the full expression being parsed, when known
    :param position: offset into ``text`` of the offending token, or
                     None if the expression ended too early

    """
    def __init__(self, message, text=None, position=None):
        XPathError.__init__(self, message)
        self.message = message
        self.text = text
        self.position = position

    def __str__(self):
        if self.text is None:
            return self.message
        if self.position is None:
            return '%s in %r (at end of expression)' % (self.message, self.text)
        return '%s in %r at position %d' % (self.message, self.text,
                                            self.position)

class XPathStructureError(XPathError):
    """A path operation needed a step that the decomposed path does not
    have, for instance when :func:`~xpathsteps.join` runs out of steps to
    cancel against."""
