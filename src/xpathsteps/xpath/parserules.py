"""XPath parsing rules.

To understand how this module works, it is valuable to have a strong
understanding of the `ply <http://www.dabeaz.com/ply/>`_ module.

The grammar follows the abbreviated syntax of XPath 1.0 with the XPath 2.0
extensions that show up in location paths: any step expression (including
``.`` and ``..``) may carry predicates, path steps may be filter
expressions, parenthesized expressions may be comma-separated sequences, and
value comparisons (``eq``, ``ne``, ...) and ``idiv`` are operators.

Every rule that produces an :mod:`~xpathsteps.xpath.ast` node sets its
``start`` and ``end`` source offsets. Terminal end offsets come from the
``endlexpos`` attribute that :mod:`xpathsteps.xpath.core` adds to tokens.
"""

from ply.lex import LexToken

from xpathsteps.exceptions import XPathSyntaxError
from xpathsteps.xpath import ast
from xpathsteps.xpath.lexrules import tokens

start = 'expr'

def _start(p, n):
    sym = p.slice[n]
    if isinstance(sym, LexToken):
        return sym.lexpos
    return sym.value.start

def _end(p, n):
    sym = p.slice[n]
    if isinstance(sym, LexToken):
        return sym.endlexpos
    return sym.value.end

def _spanned(node, start, end):
    node.start = start
    node.end = end
    return node

def _binary(p):
    return _spanned(ast.BinaryExpression(p[1], p[2], p[3]),
                    _start(p, 1), _end(p, 3))

def _with_predicates(node, p, first, predicates):
    # a node's span runs through its last predicate, if it has any
    end = predicates[-1].end if predicates else _end(p, first)
    return _spanned(node, _start(p, 1), end)

def _flatten_sequence(expr):
    if isinstance(expr, ast.BinaryExpression) and expr.op == ',':
        return _flatten_sequence(expr.left) + _flatten_sequence(expr.right)
    return [expr]

#
# expressions
#

def p_expr_single(p):
    """
    expr : or_expr
    """
    p[0] = p[1]

def p_expr_sequence(p):
    """
    expr : expr COMMA or_expr
    """
    p[0] = _binary(p)

def p_binary_expr(p):
    """
    or_expr : or_expr OR_OP and_expr
    and_expr : and_expr AND_OP equality_expr
    equality_expr : equality_expr EQUAL_OP relational_expr
                  | equality_expr VALUE_COMP_OP relational_expr
    relational_expr : relational_expr REL_OP additive_expr
    additive_expr : additive_expr PLUS_OP multiplicative_expr
                  | additive_expr MINUS_OP multiplicative_expr
    multiplicative_expr : multiplicative_expr MULT_OP unary_expr
                        | multiplicative_expr DIV_OP unary_expr
                        | multiplicative_expr IDIV_OP unary_expr
                        | multiplicative_expr MOD_OP unary_expr
    union_expr : union_expr UNION_OP path_expr
    """
    p[0] = _binary(p)

def p_unary_expr(p):
    """
    unary_expr : MINUS_OP unary_expr
    """
    p[0] = _spanned(ast.UnaryExpression(p[1], p[2]), _start(p, 1), _end(p, 2))

def p_passthru(p):
    """
    or_expr : and_expr
    and_expr : equality_expr
    equality_expr : relational_expr
    relational_expr : additive_expr
    additive_expr : multiplicative_expr
    multiplicative_expr : unary_expr
    unary_expr : union_expr
    union_expr : path_expr
    path_expr : relative_path
    step_expr : axis_step
              | filter_expr
    """
    p[0] = p[1]

#
# paths
#

def p_path_root(p):
    """
    path_expr : PATH_SEP
    """
    p[0] = _spanned(ast.AbsolutePath(p[1]), _start(p, 1), _end(p, 1))

def p_path_absolute(p):
    """
    path_expr : PATH_SEP relative_path
              | ABBREV_PATH_SEP relative_path
    """
    p[0] = _spanned(ast.AbsolutePath(p[1], p[2]), _start(p, 1), _end(p, 2))

def p_relative_path_step(p):
    """
    relative_path : step_expr
    """
    p[0] = p[1]

def p_relative_path(p):
    """
    relative_path : relative_path PATH_SEP step_expr
                  | relative_path ABBREV_PATH_SEP step_expr
    """
    p[0] = _binary(p)

#
# steps
#

def p_axis_step(p):
    """
    axis_step : node_test predicate_list
    """
    p[0] = _with_predicates(ast.Step(None, p[1], p[2]), p, 1, p[2])

def p_axis_step_attribute(p):
    """
    axis_step : ABBREV_AXIS_AT node_test predicate_list
    """
    p[0] = _with_predicates(ast.Step(p[1], p[2], p[3]), p, 2, p[3])

def p_axis_step_named_axis(p):
    """
    axis_step : NCNAME AXIS_SEP node_test predicate_list
    """
    p[0] = _with_predicates(ast.Step(p[1], p[3], p[4]), p, 3, p[4])

def p_axis_step_abbreviated(p):
    """
    axis_step : ABBREV_STEP_SELF predicate_list
              | ABBREV_STEP_PARENT predicate_list
    """
    p[0] = _with_predicates(ast.AbbreviatedStep(p[1], p[2]), p, 1, p[2])

def p_node_test_name(p):
    """
    node_test : qname
    """
    prefix, name = p[1]
    p[0] = _spanned(ast.NameTest(prefix, name), p[1].start, p[1].end)

def p_node_test_star(p):
    """
    node_test : STAR_OP
    """
    p[0] = _spanned(ast.NameTest(None, p[1]), _start(p, 1), _end(p, 1))

def p_node_test_prefixed_star(p):
    """
    node_test : NCNAME COLON STAR_OP
    """
    p[0] = _spanned(ast.NameTest(p[1], p[3]), _start(p, 1), _end(p, 3))

def p_node_test_node_type(p):
    """
    node_test : NODETYPE OPEN_PAREN CLOSE_PAREN
    """
    p[0] = _spanned(ast.NodeType(p[1]), _start(p, 1), _end(p, 3))

def p_node_test_node_type_literal(p):
    """
    node_test : NODETYPE OPEN_PAREN LITERAL CLOSE_PAREN
    """
    p[0] = _spanned(ast.NodeType(p[1], p[3]), _start(p, 1), _end(p, 4))

class QName(tuple):
    """(prefix, localname) pair that remembers where it was parsed."""
    start = None
    end = None

def p_qname_unprefixed(p):
    """
    qname : NCNAME
    """
    p[0] = _spanned(QName((None, p[1])), _start(p, 1), _end(p, 1))

def p_qname_prefixed(p):
    """
    qname : NCNAME COLON NCNAME
    """
    p[0] = _spanned(QName((p[1], p[3])), _start(p, 1), _end(p, 3))

#
# predicates
#

def p_predicate_list_empty(p):
    """
    predicate_list :
    """
    p[0] = []

def p_predicate_list(p):
    """
    predicate_list : predicate_list predicate
    """
    p[0] = p[1]
    p[0].append(p[2])

def p_predicate(p):
    """
    predicate : OPEN_BRACKET expr CLOSE_BRACKET
    """
    p[0] = _spanned(ast.Predicate(p[2]), _start(p, 1), _end(p, 3))

#
# filter expressions
#

def p_filter_expr(p):
    """
    filter_expr : primary_expr predicate_list
    """
    if p[2]:
        p[0] = _with_predicates(ast.FilterExpression(p[1], p[2]), p, 1, p[2])
    else:
        p[0] = p[1]

def p_primary_expr_variable(p):
    """
    primary_expr : DOLLAR qname
    """
    p[0] = _spanned(ast.VariableReference(tuple(p[2])),
                    _start(p, 1), _end(p, 2))

def p_primary_expr_sequence(p):
    """
    primary_expr : OPEN_PAREN expr CLOSE_PAREN
    """
    p[0] = _spanned(ast.Sequence(_flatten_sequence(p[2])),
                    _start(p, 1), _end(p, 3))

def p_primary_expr_empty_sequence(p):
    """
    primary_expr : OPEN_PAREN CLOSE_PAREN
    """
    p[0] = _spanned(ast.Sequence([]), _start(p, 1), _end(p, 2))

def p_primary_expr_literal(p):
    """
    primary_expr : LITERAL
                 | FLOAT
                 | INTEGER
    """
    p[0] = _spanned(ast.Literal(p[1]), _start(p, 1), _end(p, 1))

def p_function_call(p):
    """
    primary_expr : qname OPEN_PAREN CLOSE_PAREN
    """
    prefix, name = p[1]
    p[0] = _spanned(ast.FunctionCall(prefix, name, []),
                    p[1].start, _end(p, 3))

def p_function_call_args(p):
    """
    primary_expr : qname OPEN_PAREN argument_list CLOSE_PAREN
    """
    prefix, name = p[1]
    p[0] = _spanned(ast.FunctionCall(prefix, name, p[3]),
                    p[1].start, _end(p, 4))

def p_argument_list_single(p):
    """
    argument_list : or_expr
    """
    p[0] = [p[1]]

def p_argument_list(p):
    """
    argument_list : argument_list COMMA or_expr
    """
    p[0] = p[1]
    p[0].append(p[3])

#
# errors
#

def p_error(p):
    if p is None:
        raise XPathSyntaxError('Unexpected end of expression')
    raise XPathSyntaxError("Unexpected '%s'" % (p.value,), position=p.lexpos)
