"""
Copyright (C) 2025 yuygfgg

This file is part of intopo.

intopo is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

intopo is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with intopo.  If not, see <https://www.gnu.org/licenses/>.
"""

import pytest

from intopo import (
    AmbiguousOrDisconnectedTree,
    Leaf,
    Operator,
    OperatorNode,
    StructuralAmbiguity,
    build_tree,
    render,
    scan,
)
from intopo import tree
from intopo.scanner import make_token


def build(infix: str):
    operands, tokens = scan(infix)
    return build_tree(tokens, operands)


def test_tighter_operator_becomes_right_child() -> None:
    root = build("A+B*C")
    assert isinstance(root, OperatorNode)
    assert root.token.symbol is Operator.ADD
    assert root.left == Leaf("A")
    assert isinstance(root.right, OperatorNode)
    assert root.right.token.symbol is Operator.MULTIPLY
    assert (root.right.left, root.right.right) == (Leaf("B"), Leaf("C"))


def test_looser_operator_takes_previous_as_left_child() -> None:
    root = build("A*B+C")
    assert root.token.symbol is Operator.ADD
    assert root.left.token.symbol is Operator.MULTIPLY
    assert root.right == Leaf("C")


def test_looser_operator_climbs_above_tighter_chain() -> None:
    root = build("A+B*C+D")
    assert root.token.position == 5
    assert root.left.token.position == 1
    assert root.left.right.token.symbol is Operator.MULTIPLY
    assert root.right == Leaf("D")


def test_equal_operator_replaces_tighter_right_child() -> None:
    root = build("A+B*C/D")
    assert root.token.symbol is Operator.ADD
    assert root.right.token.symbol is Operator.DIVIDE
    assert root.right.left.token.symbol is Operator.MULTIPLY
    assert root.right.right == Leaf("D")


def test_parenthesized_groups_hang_below_adjoining_operator() -> None:
    root = build("(A+B)/(C-D)")
    assert root.token.symbol is Operator.DIVIDE
    assert root.left.token.symbol is Operator.ADD
    assert root.right.token.symbol is Operator.SUBTRACT
    assert root.left.token.depth == 1
    assert root.right.token.depth == 1


def test_group_with_nested_group_attaches_its_shallowest_operator() -> None:
    root = build("(A+(B*C))*D")
    assert root.token.depth == 0
    assert root.left.token.symbol is Operator.ADD
    assert root.left.right.token.symbol is Operator.MULTIPLY
    assert root.right == Leaf("D")


def test_single_operand_is_a_leaf_tree() -> None:
    assert build_tree([], "A") == Leaf("A")


@pytest.mark.parametrize("operands", ["", "AB"])
def test_operand_count_without_operators(operands: str) -> None:
    with pytest.raises(StructuralAmbiguity):
        build_tree([], operands)


def test_too_few_operands() -> None:
    tokens = [make_token("+", 0), make_token("*", 0)]
    with pytest.raises(StructuralAmbiguity, match="Ran out of operands"):
        build_tree(tokens, "AB")


def test_too_many_operands() -> None:
    with pytest.raises(StructuralAmbiguity, match="'CD' are not used"):
        build_tree([make_token("+", 0)], "ABCD")


def test_unlinked_groups_are_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tree, "link_across_depths", lambda arena: None)
    operands, tokens = scan("(A+B)*(C+D)")
    with pytest.raises(AmbiguousOrDisconnectedTree) as excinfo:
        build_tree(tokens, operands + "XY")
    assert excinfo.value.roots == [0, 1, 2]
    assert isinstance(excinfo.value, StructuralAmbiguity)


def test_long_chain_does_not_recurse() -> None:
    infix = "+".join(["A"] * 3000)
    root = build(infix)
    assert root.token.position == len(infix) - 2


def test_render() -> None:
    assert render(build("A+B*C")).split("\n") == [
        "+(depth=0, precedence=2)",
        "  A",
        "  *(depth=0, precedence=1)",
        "    B",
        "    C",
    ]
