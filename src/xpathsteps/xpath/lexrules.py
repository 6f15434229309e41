"""XPath lexing rules.

To understand how this module works, it is valuable to have a strong
understanding of the `ply <http://www.dabeaz.com/ply/>`_ module.
"""

from ply.lex import TOKEN

from xpathsteps.exceptions import XPathSyntaxError

reserved = {
    'or': 'OR_OP',
    'and': 'AND_OP',
    'div': 'DIV_OP',
    'idiv': 'IDIV_OP',
    'mod': 'MOD_OP',
    'eq': 'VALUE_COMP_OP',
    'ne': 'VALUE_COMP_OP',
    'lt': 'VALUE_COMP_OP',
    'le': 'VALUE_COMP_OP',
    'gt': 'VALUE_COMP_OP',
    'ge': 'VALUE_COMP_OP',
}

tokens = [
        'PATH_SEP',
        'ABBREV_PATH_SEP',
        'ABBREV_STEP_SELF',
        'ABBREV_STEP_PARENT',
        'AXIS_SEP',
        'ABBREV_AXIS_AT',
        'OPEN_PAREN',
        'CLOSE_PAREN',
        'OPEN_BRACKET',
        'CLOSE_BRACKET',
        'UNION_OP',
        'EQUAL_OP',
        'REL_OP',
        'PLUS_OP',
        'MINUS_OP',
        'MULT_OP',
        'STAR_OP',
        'COMMA',
        'LITERAL',
        'FLOAT',
        'INTEGER',
        'NCNAME',
        'NODETYPE',
        'COLON',
        'DOLLAR',
    ] + sorted(set(reserved.values()))

t_PATH_SEP = r'/'
t_ABBREV_PATH_SEP = r'//'
t_ABBREV_STEP_SELF = r'\.'
t_ABBREV_STEP_PARENT = r'\.\.'
t_AXIS_SEP = r'::'
t_ABBREV_AXIS_AT = r'@'
t_OPEN_PAREN = r'\('
t_CLOSE_PAREN = r'\)'
t_OPEN_BRACKET = r'\['
t_CLOSE_BRACKET = r'\]'
t_UNION_OP = r'\|'
t_EQUAL_OP = r'!?='
t_REL_OP = r'[<>]=?'
t_PLUS_OP = r'\+'
t_MINUS_OP = r'-'
t_COMMA = r','
t_COLON = r':'
t_DOLLAR = r'\$'

t_ignore = ' \t\r\n'

def t_LITERAL(t):
    r""""(?:[^"]|"")*"|'(?:[^']|'')*'"""
    quote = t.value[0]
    # XPath 2.0 escapes a quote inside a literal by doubling it
    t.value = t.value[1:-1].replace(quote * 2, quote)
    return t

def t_FLOAT(t):
    r'\d+\.\d*|\.\d+'
    t.value = float(t.value)
    return t

def t_INTEGER(t):
    r'\d+'
    t.value = int(t.value)
    return t

# Monster regex derived from:
#  http://www.w3.org/TR/REC-xml/#NT-NameStartChar
#  http://www.w3.org/TR/REC-xml/#NT-NameChar
# EXCEPT:
# Technically those productions allow ':'. NCName, on the other hand:
#  http://www.w3.org/TR/REC-xml-names/#NT-NCName
# explicitly excludes those names that have ':'. We implement this by
# simply removing ':' from our regexes.
NameStartChar = r'[A-Z_a-z\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u02ff' + \
    r'\u0370-\u037d\u037f-\u1fff\u200c-\u200d\u2070-\u218f' + \
    r'\u2c00-\u2fef\u3001-\ud7ff\uf900-\ufdcf\ufdf0-\ufffd' + \
    r'\U00010000-\U000effff]'
# additional characters allowed in NCNames after the first character
NameChar_extras = r'[-.0-9\u00b7\u0300-\u036f\u203f-\u2040]'

NCNAME_REGEX = NameStartChar + r'(?:' + NameStartChar + r'|' + \
    NameChar_extras + r')*'

NODE_TYPES = set(['comment', 'text', 'processing-instruction', 'node'])

# Per http://www.w3.org/TR/xpath/#exprlex :
#   "If there is a preceding token and the preceding token is not one of @,
#    ::, (, [, , or an Operator, then a * must be recognized as a
#    MultiplyOperator and an NCName must be recognized as an OperatorName."
#   "Otherwise, the token must not be recognized as a MultiplyOperator...."
#
# Note that the XPath recommendation doesn't list ':' or '$' but we do. They can remove ':'
# because in the lexical structure defined by that section, ':' never exists
# on its own: It is always part of a NameTest or QName. Instead, we break
# QName down into NCName ':' NCName and put the parts together in the
# parser. That means that we need to pass the parser a STAR_OP for
# NCName ':' '*', not a MULT_OP, and an NCNAME for 'pre:div'. '$' is in the
# same position for variable names like '$and'.
#
# We implement this by making the lexer keep track of its last token. Note
# that the ply lexer doesn't do this by default. This only works because
# core.py tweaks the token() logic to do so. The check is on token types
# rather than values: a '*' name test does not force anything, and neither
# does an element that happens to be called 'and'.
OPERATOR_FORCERS = set([
    'ABBREV_AXIS_AT', 'AXIS_SEP', 'OPEN_PAREN', 'OPEN_BRACKET', 'COMMA',
    'MULT_OP', 'PATH_SEP', 'ABBREV_PATH_SEP', 'UNION_OP', 'PLUS_OP',
    'MINUS_OP', 'EQUAL_OP', 'REL_OP', 'COLON', 'DOLLAR',
]) | set(reserved.values())

def _operator_allowed(lexer):
    last = getattr(lexer, 'last', None)
    return last is not None and last.type not in OPERATOR_FORCERS

def _followed_by_paren(lexer):
    rest = lexer.lexdata[lexer.lexpos:]
    return rest.lstrip(t_ignore).startswith('(')

@TOKEN(NCNAME_REGEX)
def t_NCNAME(t):
    kwtoken = reserved.get(t.value, None)
    if kwtoken and _operator_allowed(t.lexer):
        t.type = kwtoken
    elif t.value in NODE_TYPES and _followed_by_paren(t.lexer):
        t.type = 'NODETYPE'
    return t

def t_MULT_OP(t):
    r'\*'
    if not _operator_allowed(t.lexer):
        t.type = 'STAR_OP'
    # else stick with MULT_OP
    return t

def t_error(t):
    raise XPathSyntaxError("Unknown text '%s'" % (t.value,),
                           position=t.lexpos)
