import logging

from evaluator import evaluate
from lexer import Lexer
from shunting_yard import ShuntingYardParser
from simplifier import Simplifier

logger = logging.getLogger(__name__)


def run(text, simplify=True, legacy_operand_order=False):
    """Lex, parse, optionally simplify, and evaluate ``text``.

    Returns the ``ResultEval`` or ``None`` for an ill-typed expression.
    ``LexError`` and ``ParseError`` propagate to the caller.
    """
    logger.info("Parsing...")
    parser = ShuntingYardParser(Lexer(text), legacy_operand_order=legacy_operand_order)
    ast = parser.parse()
    logger.debug("AST: %s", ast)

    if simplify:
        logger.info("Simplifying...")
        simplifier = Simplifier()
        ast = simplifier.simplify_fix(ast)
        logger.debug("Simplified AST (%d pass(es)): %s", simplifier.passes, ast)

    logger.info("Evaluating...")
    result = evaluate(ast)
    if result is None:
        logger.info("Expression is not well-typed: %s", ast)
    return result
