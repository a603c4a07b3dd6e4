from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from ast_nodes import *
from errors import ParseError

# Reference grammar. One rule per precedence level: * > + > ||, all left associative.
GRAMMAR = r"""
?start: or_expr

?or_expr: or_expr "||" add_expr -> or_
        | add_expr

?add_expr: add_expr "+" mul_expr -> add
         | mul_expr

?mul_expr: mul_expr "*" atom -> multiply
         | atom

?atom: "0" -> zero
     | "1" -> one
     | "true" -> true
     | "false" -> false
     | "(" or_expr ")"

%import common.WS
%ignore WS
"""


class ExprTransformer(Transformer):
    # --- Literals ---
    def zero(self, items):
        return Number(0)

    def one(self, items):
        return Number(1)

    def true(self, items):
        return Bool(True)

    def false(self, items):
        return Bool(False)

    # --- Operators ---
    # Anonymous operator tokens are filtered out, so items is always [left, right].
    def add(self, items):
        return Add(items[0], items[1])

    def multiply(self, items):
        return Multiply(items[0], items[1])

    def or_(self, items):
        return Or(items[0], items[1])


class GrammarParser:
    """Parses text straight from the grammar, without the operator stacks."""

    def __init__(self, parser='earley'):
        self.lark = Lark(GRAMMAR, start='start', parser=parser)
        self.transformer = ExprTransformer()

    def parse(self, text):
        try:
            tree = self.lark.parse(text)
        except UnexpectedInput as e:
            raise ParseError(f"Syntax error: {e}", getattr(e, 'pos_in_stream', None)) from e
        return self.transformer.transform(tree)


def parse_grammar(text, parser='earley'):
    return GrammarParser(parser).parse(text)
