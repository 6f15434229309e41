"""Decompose a parsed XPath expression into its location steps.

The tree produced by :mod:`xpathsteps.xpath` is walked depth first. Each
axis step and filter expression that is not inside a predicate becomes a
candidate :class:`~xpathsteps.steps.Step`, taken from the source text so
that the original spelling (whitespace inside predicates included) is kept.

Because children are finished before their parents, a filter expression
such as ``(a/b)[1]`` or ``count(x/y)`` is seen only after the steps inside
it. Those inner steps are already queued by then; the enclosing expression
replaces every queued entry whose source span it contains, so the queue
ends up holding only outermost, non-overlapping steps in source order.
"""

import logging

from xpathsteps import xpath
from xpathsteps.steps import Step, PathInfo
from xpathsteps.xpath import ast

__all__ = ['parse', 'decompose']

logger = logging.getLogger(__name__)

AXIS_STEPS = (ast.Step, ast.AbbreviatedStep)
FILTER_EXPRESSIONS = (ast.FilterExpression, ast.VariableReference,
                      ast.FunctionCall, ast.Sequence, ast.Literal)

class _Candidate(object):
    # a step waiting in the queue, with the source span it came from
    def __init__(self, step, start, end):
        self.step = step
        self.start = start
        self.end = end

    def is_part_of(self, start, end):
        return self.start >= start and self.end <= end


class _StepCollector(object):

    def __init__(self, text):
        self.text = text
        self.queue = []
        self.predicate_depth = 0
        self.attribute_name = None
        self.attribute = None
        self.path_to_last_element = None

    def walk(self, node):
        is_predicate = isinstance(node, ast.Predicate)
        if is_predicate:
            self.predicate_depth += 1
        for child in node.children():
            self.walk(child)
        if is_predicate:
            self.predicate_depth -= 1

        if self.predicate_depth > 0:
            return

        if isinstance(node, AXIS_STEPS):
            candidate = self.found_step(node, self.axis_step_text(node),
                                        node.predicates)
            if isinstance(node, ast.Step) and node.axis == '@':
                self.found_attribute(node, candidate)
        elif isinstance(node, FILTER_EXPRESSIONS):
            if isinstance(node, ast.FilterExpression):
                text = node.base.source(self.text)
                predicates = node.predicates
            else:
                text = node.source(self.text)
                predicates = []
            self.found_step(node, text, predicates)

    def axis_step_text(self, node):
        if isinstance(node, ast.AbbreviatedStep):
            return node.abbr
        return self.text[node.start:node.node_test.end]

    def found_step(self, node, text, predicates):
        step = Step(text, [p.inner_source(self.text) for p in predicates])
        if self.queue and self.queue[-1].is_part_of(node.start, node.end):
            # the new node encloses steps already queued: it replaces them
            while self.queue and self.queue[-1].is_part_of(node.start, node.end):
                self.queue.pop()
        candidate = _Candidate(step, node.start, node.end)
        self.queue.append(candidate)
        return candidate

    def found_attribute(self, node, candidate):
        self.attribute = candidate
        self.attribute_name = str(node.node_test)
        # node.start is the offset of the '@'
        self.path_to_last_element = self.text[:node.start].rstrip('/')


def decompose(xp_ast, text):
    """Decompose ``xp_ast``, the tree parsed from ``text``, into a
    :class:`~xpathsteps.steps.PathInfo`."""
    collector = _StepCollector(text)
    collector.walk(xp_ast)

    path_to_last_element = collector.path_to_last_element
    if collector.attribute_name is None:
        # not an attribute, so the whole path leads to the last element
        path_to_last_element = text

    attribute_index = None
    if collector.attribute in collector.queue:
        attribute_index = collector.queue.index(collector.attribute)

    info = PathInfo([c.step for c in collector.queue], path_to_last_element,
                    collector.attribute_name, attribute_index)
    logger.debug('Decomposed %r into %r', text, info)
    return info

def parse(text):
    """Parse the XPath expression ``text`` and decompose it into a
    :class:`~xpathsteps.steps.PathInfo`.

    :raises XPathSyntaxError: if ``text`` is not a valid expression
    """
    return decompose(xpath.parse(text), text)
