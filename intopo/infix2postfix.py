from dataclasses import dataclass
from functools import lru_cache

from .scanner import OperatorToken, scan
from .tree import Leaf, TreeNode, build_tree


@dataclass(frozen=True)
class Trace:
    """
    Intermediate state of one conversion.

    Attributes:
        infix: The input expression.
        operands: Operand characters in source order.
        tokens: Operator tokens in source order, with their parenthesis depth.
        root: Root of the expression tree.
        postfix: The converted expression.
    """

    infix: str
    operands: str
    tokens: tuple[OperatorToken, ...]
    root: TreeNode
    postfix: str


def postorder(root: TreeNode) -> str:
    """
    Serialize a tree as left subtree, right subtree, then the node itself.
    """
    output: list[str] = []
    stack: list[tuple[TreeNode, bool]] = [(root, False)]
    while stack:
        node, visited = stack.pop()
        if isinstance(node, Leaf):
            output.append(node.operand)
        elif visited:
            output.append(node.token.symbol)
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
    return "".join(output)


def trace(infix: str) -> Trace:
    """
    Convert an infix expression and keep the intermediate results.

    Raises:
        InfixError: If the expression cannot be converted.
    """
    operands, tokens = scan(infix)
    root = build_tree(tokens, operands)
    return Trace(infix, operands, tuple(tokens), root, postorder(root))


@lru_cache
def infix2postfix(infix: str) -> str:
    R"""
    Convert an infix expression to a postfix expression.

    Args:
        infix: Input infix expression, e.g. ``(A+B)/(C-D)``.

    Returns:
        Converted postfix expression, e.g. ``AB+CD-/``.

    Raises:
        UnknownOperator: If the expression contains an unsupported character.
        UnbalancedParentheses: If the parentheses do not match.
        MalformedExpression: If operands and operators do not alternate.
        StructuralAmbiguity: If the operators cannot be linked into a single tree.
    """
    return trace(infix).postfix


interpret = infix2postfix
