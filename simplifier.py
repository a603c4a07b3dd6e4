import logging

from ast_nodes import *

logger = logging.getLogger(__name__)

ZERO = Number(0)


class Simplifier:
    def __init__(self):
        self.passes = 0

    def simplify(self, node):
        """One bottom-up rewrite pass. Returns a new tree; the input is untouched."""
        results = []
        # (rebuild?, node): children are visited first, then the parent is rebuilt
        work = [(False, node)]
        while work:
            rebuild, current = work.pop()
            if rebuild:
                right = results.pop()
                left = results.pop()
                results.append(type(current)(left, right))
            elif isinstance(current, (Number, Bool)):
                results.append(current)
            elif isinstance(current, Multiply) and (current.left == ZERO or current.right == ZERO):
                # Syntactic check only: the other side is dropped unevaluated,
                # even when it is ill-typed.
                results.append(ZERO)
            elif isinstance(current, (Add, Multiply, Or)):
                work.append((True, current))
                work.append((False, current.right))
                work.append((False, current.left))
            else:
                raise TypeError(f"Cannot simplify {type(current).__name__}")
        return results.pop()

    def simplify_fix(self, ast):
        """Apply ``simplify`` until the tree stops changing."""
        self.passes = 0
        while True:
            self.passes += 1
            simplified = self.simplify(ast)
            if simplified == ast:
                logger.debug("fixpoint reached after %d pass(es): %s", self.passes, ast)
                return ast
            logger.debug("pass %d: %s -> %s", self.passes, ast, simplified)
            ast = simplified


def simplify(node):
    return Simplifier().simplify(node)


def simplify_fix(ast):
    return Simplifier().simplify_fix(ast)
