"""
Tree-walking evaluator.

Ill-typed expressions do not raise: they evaluate to ``None``. Operands are
checked one at a time and evaluation stops at the first one that fails, so
a partially failing subtree can never be unwrapped by mistake. The walk
keeps its own work stack, so tree depth is not limited by Python's
recursion limit.
"""

from ast_nodes import *

# Work stack steps
_VISIT, _LEFT_DONE, _RIGHT_DONE = range(3)

_ARITHMETIC = {
    Add: lambda a, b: a + b,
    Multiply: lambda a, b: a * b,
}


def evaluate(node):
    """Reduce ``node`` to an ``IntResult`` or ``BoolResult``, or ``None`` if ill-typed."""
    results = []
    work = [(_VISIT, node)]

    while work:
        step, current = work.pop()

        if step == _VISIT:
            if isinstance(current, Number):
                results.append(IntResult(current.value))
            elif isinstance(current, Bool):
                results.append(BoolResult(current.value))
            elif isinstance(current, (Add, Multiply, Or)):
                work.append((_LEFT_DONE, current))
                work.append((_VISIT, current.left))
            else:
                raise TypeError(f"Unknown node type: {type(current).__name__}")

        elif step == _LEFT_DONE:
            left = results[-1]
            if isinstance(current, Or):
                if not isinstance(left, BoolResult):
                    # absent or Int: the right side is never looked at
                    results[-1] = None
                    continue
                if left.value:
                    continue
                results.pop()
            elif not isinstance(left, IntResult):
                results[-1] = None
                continue
            work.append((_RIGHT_DONE, current))
            work.append((_VISIT, current.right))

        else:
            right = results.pop()
            if isinstance(current, Or):
                results.append(BoolResult(right.value) if isinstance(right, BoolResult) else None)
            else:
                left = results.pop()
                if isinstance(right, IntResult):
                    results.append(IntResult(_ARITHMETIC[type(current)](left.value, right.value)))
                else:
                    results.append(None)

    return results.pop()
