from dataclasses import dataclass
from itertools import zip_longest


class Node:
    """Base class of every AST node.

    Equality and hashing walk the tree with an explicit stack, so long
    operator chains compare without hitting the recursion limit.
    """

    def _prefix(self):
        # Prefix walk; every node kind has a fixed arity, so this is unambiguous.
        work = [self]
        while work:
            node = work.pop()
            if isinstance(node, BinaryNode):
                yield type(node), None
                work.append(node.right)
                work.append(node.left)
            else:
                yield type(node), node.value

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return all(a == b for a, b in zip_longest(self._prefix(), other._prefix()))

    def __hash__(self):
        return hash(tuple(self._prefix()))


@dataclass(frozen=True, eq=False)
class Number(Node):
    value: int
    def __str__(self):
        return str(self.value)

@dataclass(frozen=True, eq=False)
class Bool(Node):
    value: bool
    def __str__(self):
        return "true" if self.value else "false"

# Composite nodes own both children exclusively; trees never share subtrees.

@dataclass(frozen=True, eq=False)
class BinaryNode(Node):
    left: Node
    right: Node
    symbol = "?"
    def __str__(self):
        parts = []
        work = [self]
        while work:
            item = work.pop()
            if isinstance(item, BinaryNode):
                work.extend([")", item.right, f" {item.symbol} ", item.left, "("])
            else:
                parts.append(str(item))
        return "".join(parts)

@dataclass(frozen=True, eq=False)
class Add(BinaryNode):
    symbol = "+"

@dataclass(frozen=True, eq=False)
class Multiply(BinaryNode):
    symbol = "*"

@dataclass(frozen=True, eq=False)
class Or(BinaryNode):
    symbol = "||"


# Evaluation results. These are values, not tree nodes.

class ResultEval:
    """Outcome of a successful evaluation."""


@dataclass(frozen=True)
class IntResult(ResultEval):
    value: int
    def __str__(self):
        return str(self.value)

@dataclass(frozen=True)
class BoolResult(ResultEval):
    value: bool
    def __str__(self):
        return "true" if self.value else "false"
