"""
Shunting-yard parser: token stream -> AST.

The parser is purely structural. It keeps an operator stack and an operand
stack for a single ``parse()`` call and reduces by precedence; all algebraic
folding is left to the simplifier.
"""

import logging

from ast_nodes import Add, Bool, Multiply, Number, Or
from errors import ParseError
from lexer import Lexer, TokenKind

logger = logging.getLogger(__name__)

_LEAVES = {
    TokenKind.ZERO: Number(0),
    TokenKind.ONE: Number(1),
    TokenKind.TRUE: Bool(True),
    TokenKind.FALSE: Bool(False),
}

_NODES = {
    TokenKind.ADD: Add,
    TokenKind.MULTIPLY: Multiply,
    TokenKind.OR: Or,
}


class ShuntingYardParser:
    def __init__(self, lexer, legacy_operand_order=False):
        self.lexer = lexer
        # Reproduce the historical tree shape: Add/Multiply keep pop order
        # (right, left) while Or is built (left, right).
        self.legacy_operand_order = legacy_operand_order

    def _reduce(self, operator, operands):
        """Pop two operands, combine them with ``operator`` and push the result."""
        node_type = _NODES.get(operator.kind)
        if node_type is None:
            raise ParseError(f"Unclosed '(' at position {operator.pos}", operator.pos, operator)
        if len(operands) < 2:
            raise ParseError(
                f"Operator '{operator}' at position {operator.pos} is missing an operand",
                operator.pos,
                operator,
            )

        first = operands.pop()
        second = operands.pop()
        if self.legacy_operand_order and node_type is not Or:
            node = node_type(first, second)
        else:
            node = node_type(second, first)

        logger.debug("reduce %s -> %s", operator, node)
        operands.append(node)

    def parse(self):
        """Consume tokens up to ``EOF`` and return the single resulting tree.

        ``LexError`` propagates from the lexer; ``ParseError`` is raised when
        the tokens do not reduce to exactly one tree.
        """
        operators = []
        operands = []

        while True:
            token = self.lexer.next_token()
            kind = token.kind

            if kind in _LEAVES:
                operands.append(_LEAVES[kind])
            elif token.is_operator:
                while operators and operators[-1].is_operator \
                        and operators[-1].precedence >= token.precedence:
                    self._reduce(operators.pop(), operands)
                operators.append(token)
            elif kind is TokenKind.LPAREN:
                operators.append(token)
            elif kind is TokenKind.RPAREN:
                while True:
                    if not operators:
                        raise ParseError(
                            f"Unmatched ')' at position {token.pos}", token.pos, token
                        )
                    top = operators.pop()
                    if top.kind is TokenKind.LPAREN:
                        break
                    self._reduce(top, operands)
            elif kind is TokenKind.EOF:
                break

        while operators:
            self._reduce(operators.pop(), operands)

        if len(operands) != 1:
            pos = self.lexer.position
            if not operands:
                raise ParseError("Expression is empty", pos)
            raise ParseError(
                f"Expected a single expression, found {len(operands)} "
                f"({', '.join(str(n) for n in operands)})",
                pos,
            )

        return operands[0]


def parse(text, legacy_operand_order=False):
    """Parse ``text`` into an AST."""
    return ShuntingYardParser(Lexer(text), legacy_operand_order=legacy_operand_order).parse()
