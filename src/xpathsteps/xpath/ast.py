"""Abstract syntax tree nodes for parsed XPath expressions.

Every node records the character offsets of the source text it was parsed
from: ``start`` is the offset of its first character, ``end`` the offset
just past its last one, so that ``text[node.start:node.end]`` is the exact
input (whitespace included) that produced the node.
"""

__all__ = [
    'serialize',
    'UnaryExpression',
    'BinaryExpression',
    'FilterExpression',
    'Predicate',
    'AbsolutePath',
    'Step',
    'NameTest',
    'NodeType',
    'AbbreviatedStep',
    'VariableReference',
    'FunctionCall',
    'Sequence',
    'Literal',
    ]

def serialize(xp_ast):
    return ''.join(_serialize(xp_ast))

def _serialize(xp_ast):
    if hasattr(xp_ast, '_serialize'):
        for tok in xp_ast._serialize():
            yield tok
    else:
        yield str(xp_ast)

def _quote(value):
    if '"' not in value:
        return '"%s"' % (value,)
    # XPath 2.0 escapes a quote inside a literal by doubling it
    return "'%s'" % (value.replace("'", "''"),)


class Node(object):
    start = None
    end = None

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                serialize(self))

    def _children(self):
        return iter(())

    def children(self):
        """Child nodes in source order."""
        return list(self._children())

    def source(self, text):
        """The slice of ``text`` this node was parsed from."""
        return text[self.start:self.end]


class UnaryExpression(Node):
    def __init__(self, op, right):
        self.op = op
        self.right = right

    def __repr__(self):
        return '<%s %s %s>' % (self.__class__.__name__,
                self.op, serialize(self.right))

    def _serialize(self):
        yield self.op
        for tok in _serialize(self.right):
            yield tok

    def _children(self):
        yield self.right

    def struct(self):
        return [self.op, self.right]

KEYWORDS = set(['or', 'and', 'div', 'idiv', 'mod',
                'eq', 'ne', 'lt', 'le', 'gt', 'ge'])
class BinaryExpression(Node):
    def __init__(self, left, op, right):
        self.left = left
        self.op = op
        self.right = right

    def __repr__(self):
        return '<%s %s %s %s>' % (self.__class__.__name__,
                serialize(self.left), self.op, serialize(self.right))

    def _serialize(self):
        for tok in _serialize(self.left):
            yield tok

        if self.op in KEYWORDS:
            yield ' '
            yield self.op
            yield ' '
        elif self.op == ',':
            yield ', '
        else:
            yield self.op

        for tok in _serialize(self.right):
            yield tok

    def _children(self):
        yield self.left
        yield self.right

    def struct(self):
        return [self.op, self.left, self.right]

class FilterExpression(Node):
    """A primary expression (variable reference, literal, function call
    or parenthesized expression) followed by one or more predicates. A
    primary expression without predicates is not wrapped."""
    def __init__(self, base, predicates=None):
        self.base = base
        self.predicates = predicates or []

    def append_predicate(self, pred):
        self.predicates.append(pred)

    def _serialize(self):
        for tok in _serialize(self.base):
            yield tok
        for pred in self.predicates:
            for tok in _serialize(pred):
                yield tok

    def _children(self):
        yield self.base
        for pred in self.predicates:
            yield pred

    def struct(self):
        return ['[]', self.base] + self.predicates

class Predicate(Node):
    """A bracketed predicate. Its source span includes both brackets."""
    def __init__(self, expr):
        self.expr = expr

    def _serialize(self):
        yield '['
        for tok in _serialize(self.expr):
            yield tok
        yield ']'

    def _children(self):
        yield self.expr

    def struct(self):
        return self.expr.struct() if hasattr(self.expr, 'struct') else self.expr

    def inner_source(self, text):
        """The predicate's source text without its brackets."""
        return text[self.start + 1:self.end - 1]

class AbsolutePath(Node):
    def __init__(self, op='/', relative=None):
        self.op = op
        self.relative = relative

    def __repr__(self):
        return '<%s %s %s>' % (self.__class__.__name__,
                self.op, serialize(self.relative))

    def _serialize(self):
        yield self.op
        if self.relative is not None:
            for tok in _serialize(self.relative):
                yield tok

    def _children(self):
        if self.relative is not None:
            yield self.relative

    def struct(self):
        return [self.op, self.relative]

class Step(Node):
    def __init__(self, axis, node_test, predicates):
        self.axis = axis
        self.node_test = node_test
        self.predicates = predicates

    def _serialize(self):
        if self.axis == '@':
            yield '@'
        elif self.axis:
            yield self.axis
            yield '::'

        for tok in self.node_test._serialize():
            yield tok

        for predicate in self.predicates:
            for tok in _serialize(predicate):
                yield tok

    def _children(self):
        yield self.node_test
        for predicate in self.predicates:
            yield predicate

    def struct(self):
        name = str(self.node_test)
        if self.axis is not None:
            name = self.axis + '::' + name
        if self.predicates:
            return [name + '[]'] + self.predicates
        else:
            return name

class NameTest(Node):
    def __init__(self, prefix, name):
        self.prefix = prefix
        self.name = name

    def _serialize(self):
        if self.prefix:
            yield self.prefix
            yield ':'
        yield self.name

    def __str__(self):
        return ''.join(self._serialize())

class NodeType(Node):
    def __init__(self, name, literal=None):
        self.name = name
        self.literal = literal

    def _serialize(self):
        yield self.name
        yield '('
        if self.literal is not None:
            yield _quote(self.literal)
        yield ')'

    def __str__(self):
        return ''.join(self._serialize())

class AbbreviatedStep(Node):
    """``.`` or ``..``, optionally followed by predicates."""
    def __init__(self, abbr, predicates=None):
        self.abbr = abbr
        self.predicates = predicates or []

    def _serialize(self):
        yield self.abbr
        for predicate in self.predicates:
            for tok in _serialize(predicate):
                yield tok

    def _children(self):
        for predicate in self.predicates:
            yield predicate

    def struct(self):
        if self.predicates:
            return [self.abbr + '[]'] + self.predicates
        return self.abbr

class VariableReference(Node):
    def __init__(self, name):
        self.name = name

    def _serialize(self):
        yield '$'
        prefix, localname = self.name
        if prefix:
            yield prefix
            yield ':'
        yield localname

    def struct(self):
        return ''.join(self._serialize())

class FunctionCall(Node):
    def __init__(self, prefix, name, args):
        self.prefix = prefix
        self.name = name
        self.args = args

    def _serialize(self):
        if self.prefix:
            yield self.prefix
            yield ':'
        yield self.name
        yield '('
        if self.args:
            for tok in _serialize(self.args[0]):
                yield tok

            for arg in self.args[1:]:
                yield ','
                for tok in _serialize(arg):
                    yield tok
        yield ')'

    def _children(self):
        for arg in self.args:
            yield arg

    def struct(self):
        return [self.name + '()'] + self.args

class Sequence(Node):
    """A parenthesized expression. ``()`` is the empty sequence and
    ``(a, b)`` a sequence of two items."""
    def __init__(self, items):
        self.items = items

    def _serialize(self):
        yield '('
        for i, item in enumerate(self.items):
            if i:
                yield ', '
            for tok in _serialize(item):
                yield tok
        yield ')'

    def _children(self):
        for item in self.items:
            yield item

    def struct(self):
        return ['()'] + self.items

class Literal(Node):
    """A string or numeric literal. ``value`` is the Python value: quotes
    are removed from strings and numbers are converted."""
    def __init__(self, value):
        self.value = value

    def _serialize(self):
        if isinstance(self.value, str):
            yield _quote(self.value)
        else:
            yield str(self.value)

    def struct(self):
        return self.value
