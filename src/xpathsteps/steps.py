"""The decomposed form of an XPath location path.

A path such as ``/a/b[x = 1]/@id`` is represented as a :class:`PathInfo`
holding a sequence of :class:`Step` objects, one per top-level location
step. Everything inside a predicate stays part of that predicate's source
text; a step never contains other steps.
"""

from functools import total_ordering

from xpathsteps.exceptions import XPathStructureError

__all__ = ['Step', 'PathInfo', 'DOT_STEPS']

DOT_STEPS = ('.', '..')

def _same_predicates(mine, theirs):
    # callers guarantee equal counts; order is irrelevant
    if not mine:
        return True
    if len(mine) == 1:
        return mine[0] == theirs[0]
    return sorted(mine) == sorted(theirs)

def _contains_all(predicates, others):
    return all(p in predicates for p in others)


@total_ordering
class Step(object):
    """One location step of a path.

    :param text: node test or abbreviation of the step (``a``, ``@id``,
                 ``..``, ``$var``, ``child::a``) without its predicates;
                 surrounding whitespace is stripped
    :param predicates: source text of each predicate without its
                       brackets, in source order

    Steps are immutable. Equality ignores predicate order, so
    ``Step('a', ['x=1', 'y=2']) == Step('a', ['y=2', 'x=1'])``. Ordering
    compares :attr:`text` and then :attr:`predicate_text`; it exists for
    sorting only and says nothing about the nodes a step selects.
    """

    __slots__ = ('_text', '_predicates')

    def __init__(self, text, predicates=None):
        text = text.strip()
        if not text:
            raise ValueError('Step text must not be empty')
        self._text = text
        self._predicates = tuple(predicates or ())

    @property
    def text(self):
        return self._text

    @property
    def predicates(self):
        return self._predicates

    @property
    def predicate_text(self):
        "Predicates re-bracketed and concatenated in source order."
        return ''.join('[%s]' % p for p in self._predicates)

    @property
    def is_variable_step(self):
        return self._text.startswith('$')

    @property
    def is_dot_step(self):
        return self._text in DOT_STEPS

    def __str__(self):
        return self._text + self.predicate_text

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self)

    def __eq__(self, other):
        if not isinstance(other, Step):
            return NotImplemented
        if self._text != other._text:
            return False
        if len(self._predicates) != len(other._predicates):
            return False
        return _same_predicates(self._predicates, other._predicates)

    def __hash__(self):
        return hash((self._text, tuple(sorted(self._predicates))))

    def __lt__(self, other):
        if not isinstance(other, Step):
            return NotImplemented
        return (self._text, self.predicate_text) < \
            (other._text, other.predicate_text)

    def is_same_as(self, other):
        """Could this step be dropped from a path evaluated in the context
        of ``other``?

        True when both steps have the same text and either the same
        predicates (in any order) or, when the predicate counts differ,
        every predicate of this step is also one of ``other``'s. A step
        without predicates is therefore the same as any step with the same
        text, but a step with a predicate ``other`` lacks is not.
        """
        if self._text != other._text:
            return False

        if len(self._predicates) != len(other._predicates):
            return not self._predicates or \
                _contains_all(other._predicates, self._predicates)

        return _same_predicates(self._predicates, other._predicates)

    def is_same_as_or_narrower_than(self, other):
        """Does this step select a subset of the nodes ``other`` selects?

        True when both steps have the same text, their predicate counts
        differ and every predicate of ``other`` is also one of this step's.

        Only meaningful once :meth:`is_same_as` has been ruled out: calling
        it for two steps with equal predicates is a programming error.
        """
        if self._text != other._text:
            return False

        if len(self._predicates) != len(other._predicates):
            return not other._predicates or \
                _contains_all(self._predicates, other._predicates)

        assert not self.is_same_as(other), \
            'is_same_as_or_narrower_than() called without checking is_same_as() first'
        return False


class PathInfo(object):
    """The result of decomposing one XPath expression.

    .. attribute:: location_steps

       every top-level step in source order, including a trailing
       attribute step

    .. attribute:: attribute_name

       name of the attribute the path ends on, or None

    .. attribute:: path_to_last_element

       the expression up to, but not including, its attribute step (with
       trailing ``/`` removed); the whole expression if it does not end on
       an attribute

    .. attribute:: attribute_index

       position of the attribute step in :attr:`location_steps`; defaults
       to the last step when it is an attribute step
    """

    def __init__(self, location_steps, path_to_last_element,
                 attribute_name=None, attribute_index=None):
        self.location_steps = tuple(location_steps)
        self.path_to_last_element = path_to_last_element
        self.attribute_name = attribute_name
        if attribute_index is None and attribute_name is not None and \
                self.location_steps and \
                self.location_steps[-1].text.startswith('@'):
            attribute_index = len(self.location_steps) - 1
        self.attribute_index = attribute_index

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
            '/'.join(str(s) for s in self.location_steps))

    @property
    def is_attribute(self):
        return self.attribute_name is not None

    @property
    def steps(self):
        "Element steps of the path, without the attribute step."
        if self.attribute_index is None:
            return self.location_steps
        return self.location_steps[:self.attribute_index] + \
            self.location_steps[self.attribute_index + 1:]

    @property
    def last_step(self):
        steps = self.steps
        if not steps:
            raise XPathStructureError('Path has no element steps')
        return steps[-1]

    def has_predicate(self, match):
        """Does any step have a predicate containing the string ``match``?"""
        return any(match in s.predicate_text for s in self.steps)
