# Nodes.py
"""Expression tree nodes built by the Evaluator.

Nodes are never changed after construction; operations only combine them
into larger BinOp nodes.
"""

from decimal import Decimal

from . import error as E


class Number:
    """Node for a numeric literal backed by Decimal."""
    def __init__(self, value):
        # Normalize via string to avoid float artifacts
        if not isinstance(value, Decimal):
            value = str(value)
        self.value = Decimal(value)

    def evaluate(self, variable_value=None):
        return self.value

    def __repr__(self):
        return f"Number({self.value})"


class Variable:
    """Node referencing the single named variable of an expression."""
    def __init__(self, name):
        self.name = name

    def evaluate(self, variable_value=None):
        if variable_value is None:
            raise E.MalformedExpression(f"No value supplied for variable '{self.name}'")
        return variable_value

    def __repr__(self):
        return f"Variable('{self.name}')"


class BinOp:
    """Node for a binary operation: left <operation> right."""
    def __init__(self, left, operation, right):
        self.left = left
        self.operation = operation
        self.right = right

    def evaluate(self, variable_value=None):
        """Reduce this subtree to a Decimal.

        Walks the tree with an explicit stack instead of recursion, so long
        chains like 1+1+...+1 (left-deep trees) do not hit the recursion limit.
        """
        results = []
        pending = [(self, False)]

        while pending:
            node, children_done = pending.pop()

            if not isinstance(node, BinOp):
                results.append(node.evaluate(variable_value))
            elif children_done:
                right_value = results.pop()
                left_value = results.pop()
                results.append(node.operation.compute(left_value, right_value))
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))

        return results.pop()

    def __repr__(self):
        return f"BinOp({self.operation.symbol!r}, left={self.left}, right={self.right})"
