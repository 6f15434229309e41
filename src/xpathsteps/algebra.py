"""Build new path expressions out of decomposed ones.

All functions here work on the text of paths only; nothing is evaluated
against a document.
"""

import logging

from xpathsteps.decompose import parse
from xpathsteps.exceptions import XPathStructureError
from xpathsteps.steps import DOT_STEPS

__all__ = ['add_axis', 'join', 'contextualize']

logger = logging.getLogger(__name__)

def _is_blank(path):
    return path is None or not path.strip()

def _render(steps):
    # step texts only; predicates are not carried over
    return '/'.join(s.text for s in steps)

def add_axis(axis, path):
    """Qualify a relative ``path`` with ``axis``.

    Leading ``..`` steps are dropped, since the axis already says which way
    to navigate::

        >>> add_axis('descendant', '../../b/c')
        'descendant::b/c'

    :raises XPathStructureError: if ``path`` has no steps besides the
        dropped ``..`` steps
    """
    steps = list(parse(path).location_steps)
    while steps and steps[0].text == '..':
        steps.pop(0)
    if not steps:
        raise XPathStructureError('No steps left in %r to apply axis %r to'
                                  % (path, axis))

    result = axis + '::' + _render(steps)
    logger.debug('add_axis(%r, %r) = %r', axis, path, result)
    return result

def join(first, second):
    """Append ``second`` to ``first``.

    Leading ``..`` steps of ``second`` cancel trailing steps of ``first``
    for as long as those are ordinary element steps (not ``.``, ``..`` or a
    variable reference)::

        >>> join('a/b/c', '../../x/y')
        'a/x/y'

    The result is built from step texts, so predicates of either path are
    not kept. If every step cancels out the result is ``'.'``. If either
    path is None or blank the other one is returned unchanged.

    :raises XPathStructureError: if ``second`` climbs out of ``first``
        entirely
    """
    if _is_blank(first):
        return second
    if _is_blank(second):
        return first

    first_steps = list(parse(first).location_steps)
    second_steps = list(parse(second).location_steps)

    while second_steps and second_steps[0].text == '..':
        if not first_steps:
            raise XPathStructureError('Cannot join %r to %r: no step left '
                                      'to go back from' % (second, first))
        last = first_steps[-1]
        if last.text in DOT_STEPS or last.is_variable_step:
            break
        first_steps.pop()
        second_steps.pop(0)

    result = _render(first_steps + second_steps) or '.'
    logger.debug('join(%r, %r) = %r', first, second, result)
    return result

def contextualize(context_path, path):
    """Rewrite ``path`` relative to ``context_path``.

    The result is the shortest expression that, evaluated with a node
    selected by ``context_path`` as context, selects what ``path`` selects
    from the document root. Predicates that ``path`` shares with the
    context are left out; those it adds are kept::

        >>> contextualize('/a/b/c', '/a/b/d')
        '../d'
        >>> contextualize('/a/b/c', '/a/b/c[x = 1]')
        '.[x = 1]'

    If ``context_path`` is None or empty, ``path`` is returned unchanged.
    Identical paths give ``'.'``.
    """
    if not context_path:
        return path

    context_steps = list(parse(context_path).location_steps)
    path_steps = list(parse(path).location_steps)

    # consume the steps the context already covers
    while context_steps and path_steps \
            and path_steps[0].is_same_as(context_steps[0]):
        context_steps.pop(0)
        path_steps.pop(0)

    relative_path = ''

    # the next step differs from the context only by adding predicates:
    # keep the step's element from the context and add just those
    if context_steps and path_steps \
            and path_steps[0].is_same_as_or_narrower_than(context_steps[0]):
        context_predicates = context_steps.pop(0).predicates
        extra_predicates = ''.join('[%s]' % p
                                   for p in path_steps.pop(0).predicates
                                   if p not in context_predicates)
        if not context_steps:
            relative_path += '.' + extra_predicates
        else:
            # going back up anyway: filter on the back-step itself rather
            # than writing ../.[predicate]
            context_steps.pop(0)
            relative_path += '..' + extra_predicates

    for step in path_steps:
        relative_path += '/' + step.text + step.predicate_text

    relative_path = relative_path.lstrip('/')

    # one back-step for each context step not consumed
    relative_path = '../' * len(context_steps) + relative_path

    relative_path = relative_path.rstrip('/')

    if not relative_path:
        relative_path = '.'

    logger.debug('contextualize(%r, %r) = %r', context_path, path,
                 relative_path)
    return relative_path
