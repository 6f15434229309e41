import logging
import re
import sys
import threading

from ply import lex, yacc

from xpathsteps import conf
from xpathsteps.exceptions import XPathSyntaxError
from xpathsteps.xpath import lexrules
from xpathsteps.xpath import parserules

__all__ = [ 'lexer', 'parser', 'parse', 'ptokens', 'sprint' ]

logger = logging.getLogger(__name__)

class LexerWrapper(lex.Lexer):
    def input(self, s):
        self.last = None
        lex.Lexer.input(self, s)

    def token(self):
        tok = lex.Lexer.token(self)
        if tok is not None:
            # ply only records where a token starts
            tok.endlexpos = self.lexpos
        self.last = tok
        return tok

lexer = lex.lex(module=lexrules, reflags=re.UNICODE, errorlog=logger)
lexer.__class__ = LexerWrapper

parser = yacc.yacc(module=parserules, start=parserules.start,
                   debug=conf.PARSER_DEBUG, debuglog=logger, errorlog=logger,
                   write_tables=conf.WRITE_TABLES,
                   tabmodule='xpathsteps.xpath.parsetab')

# the ply parser keeps its state stacks on the parser object
_parser_lock = threading.Lock()

def parse(text):
    """Parse an XPath expression into an abstract syntax tree built from
    :mod:`xpathsteps.xpath.ast` nodes.

    :raises XPathSyntaxError: if ``text`` is not a valid expression
    """
    # each parse gets its own lexer, so only the parser needs guarding
    parse_lexer = lexer.clone()
    try:
        with _parser_lock:
            return parser.parse(text, lexer=parse_lexer)
    except XPathSyntaxError as e:
        e.text = text
        raise

def ptokens(s, stm=None):
    """Print the tokens of ``s``, one per line, to ``stm`` (stdout by
    default)."""
    if stm is None:
        stm = sys.stdout
    token_lexer = lexer.clone()
    token_lexer.input(s)
    for tok in token_lexer:
        print(tok, file=stm)

def sprint(obj, stm=None):
    """Print an indented outline of a parsed expression. ``obj`` may be an
    AST or a string to parse first."""
    if isinstance(obj, str):
        obj = parse(obj)

    if stm is None:
        stm = sys.stdout
    _sprint(obj, '', stm)

def _sprint(obj, indent, stm):
    if hasattr(obj, 'struct'):
        obj = obj.struct()
    if isinstance(obj, (list, tuple)):
        print(indent + str(obj[0]), file=stm)
        for item in obj[1:]:
            _sprint(item, indent + '. ', stm)
    else:
        print(indent + str(obj), file=stm)
