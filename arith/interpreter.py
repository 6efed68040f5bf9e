from typing import Union
from arith.tokenizer import TokenTypes as TT
from arith.ast import AST, Literal, BinaryOp
from arith.exceptions import EvaluationError
from arith.logging_config import get_logger


logger = get_logger("interpreter")

Number = Union[int, float]


class ASTVisitor:
    def visit_Literal(self, node: Literal) -> Number:
        return node.value

    def visit_BinaryOp(self, node: BinaryOp, left: Number, right: Number) -> Number:
        if node.op.type == TT.ADD:
            return left + right
        elif node.op.type == TT.SUB:
            return left - right
        elif node.op.type == TT.MUL:
            return left * right
        else:
            if right == 0:
                raise EvaluationError("division by zero")
            return left / right

    def visit(self, node: AST) -> Number:
        # post-order walk with explicit stacks, left-deep chains like
        # "1 + 1 + ... + 1" are as deep as they are long
        pending = [(node, False)]
        values = []
        while pending:
            node, children_done = pending.pop()
            if type(node) is Literal:
                values.append(self.visit_Literal(node))
            elif type(node) is BinaryOp:
                if children_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(self.visit_BinaryOp(node, left, right))
                else:
                    pending.append((node, True))
                    pending.append((node.right, False))
                    pending.append((node.left, False))
            else:
                raise EvaluationError(f"cannot evaluate {node!r}")
        return values.pop()


def evaluate(expr: AST) -> Number:
    """Compute the value of an expression tree.

    Division always yields a float, so ``5 / (2 + 3) * 2`` gives ``2.0``.
    """
    result = ASTVisitor().visit(expr)
    logger.debug("evaluated to %r", result)
    return result
