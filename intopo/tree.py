import logging
from dataclasses import dataclass
from typing import Optional, Union

from .errors import AmbiguousOrDisconnectedTree, StructuralAmbiguity
from .scanner import OperatorToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Leaf:
    operand: str

    def __str__(self) -> str:
        return self.operand


@dataclass(frozen=True)
class OperatorNode:
    token: OperatorToken
    left: "TreeNode"
    right: "TreeNode"

    def __str__(self) -> str:
        return f"[{self.left}][{self.right}]{self.token.symbol}"


TreeNode = Union[Leaf, OperatorNode]

# A child slot holds nothing yet, the index of another operator, or an operand.
_Slot = Union[None, int, str]


class _Arena:
    """
    Link state for one tree construction.

    Operator i of the token sequence lives in slot i. Links are indices into
    the token sequence, operands are stored as their character.
    """

    def __init__(self, tokens: list[OperatorToken]):
        self.tokens = tokens
        self.left: list[_Slot] = [None] * len(tokens)
        self.right: list[_Slot] = [None] * len(tokens)
        self.parent: list[Optional[int]] = [None] * len(tokens)

    def has_parent(self, index: int) -> bool:
        return self.parent[index] is not None

    def set_left(self, index: int, child: Union[int, str]):
        self.left[index] = child
        self._adopt(index, child, "left")

    def set_right(self, index: int, child: Union[int, str]):
        self.right[index] = child
        self._adopt(index, child, "right")

    def _adopt(self, index: int, child: Union[int, str], side: str):
        if isinstance(child, int):
            self.parent[child] = index
            logger.debug(
                "Linked %s as %s child of %s",
                self.tokens[child],
                side,
                self.tokens[index],
            )
        else:
            logger.debug(
                "Attached operand '%s' as %s child of %s",
                child,
                side,
                self.tokens[index],
            )


def link_same_depth(arena: _Arena):
    """
    Link each operator to the previous operator of its parenthesis group.

    A tighter operator becomes the right child of the previous one. Otherwise
    the previous operator, or its ancestor on the right spine that binds at
    least as tight, becomes the left child of the current one.
    """
    tokens = arena.tokens
    last_at_depth: dict[int, int] = {}
    for i, token in enumerate(tokens):
        # Groups deeper than the current operator are closed.
        for depth in [d for d in last_at_depth if d > token.depth]:
            del last_at_depth[depth]
        prev = last_at_depth.get(token.depth)
        last_at_depth[token.depth] = i
        if prev is None:
            continue

        if token.binds_tighter_than(tokens[prev]):
            arena.set_right(prev, i)
            continue

        node = prev
        while True:
            ancestor = arena.parent[node]
            if ancestor is None or token.binds_tighter_than(tokens[ancestor]):
                break
            node = ancestor
        ancestor = arena.parent[node]
        if ancestor is not None:
            arena.set_right(ancestor, i)
        arena.set_left(i, node)


def _find_group_root(arena: _Arena, index: int, candidates: range) -> Optional[int]:
    # The adjacent group ends at the first operator not nested deeper than index.
    depth = arena.tokens[index].depth
    root = None
    for j in candidates:
        candidate = arena.tokens[j]
        if candidate.depth <= depth:
            break
        if arena.has_parent(j):
            continue
        if root is None or candidate.depth < arena.tokens[root].depth:
            root = j
    return root


def link_across_depths(arena: _Arena):
    """
    Attach the root of a parenthesized group to the operator adjoining it.
    """
    count = len(arena.tokens)
    for i in range(count):
        if arena.left[i] is None:
            child = _find_group_root(arena, i, range(i - 1, -1, -1))
            if child is not None:
                arena.set_left(i, child)
        if arena.right[i] is None:
            child = _find_group_root(arena, i, range(i + 1, count))
            if child is not None:
                arena.set_right(i, child)


def attach_leaves(arena: _Arena, operands: str):
    """
    Fill the remaining empty child slots with operands in left-to-right order.

    Raises:
        StructuralAmbiguity: If there are too few or too many operands.
    """
    remaining = iter(operands)
    for i, token in enumerate(arena.tokens):
        for side, slots, setter in (
            ("left", arena.left, arena.set_left),
            ("right", arena.right, arena.set_right),
        ):
            if slots[i] is not None:
                continue
            operand = next(remaining, None)
            if operand is None:
                raise StructuralAmbiguity(
                    f"Ran out of operands for the {side} side of operator '{token.symbol}'",
                    token.position if token.position >= 0 else None,
                )
            setter(i, operand)

    leftover = "".join(remaining)
    if leftover:
        raise StructuralAmbiguity(
            f"Operands '{leftover}' are not used by any operator"
        )


def find_root(arena: _Arena) -> int:
    roots = [i for i in range(len(arena.tokens)) if not arena.has_parent(i)]
    if len(roots) != 1:
        raise AmbiguousOrDisconnectedTree(roots)
    return roots[0]


def _materialize(arena: _Arena, root: int) -> OperatorNode:
    built: dict[int, OperatorNode] = {}

    def child(slot: _Slot) -> TreeNode:
        if isinstance(slot, int):
            return built[slot]
        return Leaf(slot)

    stack = [root]
    while stack:
        i = stack[-1]
        pending = [
            slot
            for slot in (arena.left[i], arena.right[i])
            if isinstance(slot, int) and slot not in built
        ]
        if pending:
            stack.extend(pending)
            continue
        stack.pop()
        built[i] = OperatorNode(
            arena.tokens[i], child(arena.left[i]), child(arena.right[i])
        )
    return built[root]


def build_tree(tokens: list[OperatorToken], operands: str) -> TreeNode:
    """
    Build the expression tree for a scanned infix expression.

    Args:
        tokens: Operator tokens in source order, with their parenthesis depth.
        operands: Operand characters in source order.

    Returns:
        The root of the tree.

    Raises:
        StructuralAmbiguity: If the operators and operands do not form exactly one tree.
    """
    if not tokens:
        if len(operands) != 1:
            raise StructuralAmbiguity(
                f"Expected a single operand without operators, got {len(operands)}"
            )
        return Leaf(operands)

    arena = _Arena(tokens)
    link_same_depth(arena)
    link_across_depths(arena)
    attach_leaves(arena, operands)
    return _materialize(arena, find_root(arena))


def render(node: TreeNode) -> str:
    """
    Draw the tree one node per line, children indented below their parent.
    """
    lines: list[str] = []
    stack: list[tuple[TreeNode, int]] = [(node, 0)]
    while stack:
        current, indent = stack.pop()
        if isinstance(current, Leaf):
            lines.append("  " * indent + current.operand)
            continue
        lines.append("  " * indent + str(current.token))
        stack.append((current.right, indent + 1))
        stack.append((current.left, indent + 1))
    return "\n".join(lines)
