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

from intopo import RPNError, postfix2infix
from intopo.postfix2infix import tokenize


@pytest.mark.parametrize(
    "postfix, expected",
    [
        ("ABC*+", "A+B*C"),
        ("AB*C+", "A*B+C"),
        ("AB*CD*+", "A*B+C*D"),
        ("AB+CD-/", "(A+B)/(C-D)"),
        ("AB*C/", "A*B/C"),
        ("AB+C*D+EF+G+/", "((A+B)*C+D)/(E+F+G)"),
        ("AB-C-", "A-B-C"),
        ("ABC--", "A-(B-C)"),
        ("ABC+*", "A*(B+C)"),
        ("ABC*/", "A/(B*C)"),
        ("A", "A"),
    ],
)
def test_postfix2infix(postfix: str, expected: str) -> None:
    assert postfix2infix(postfix) == expected


def test_whitespace_between_tokens() -> None:
    assert tokenize("A B +") == ["A", "B", "+"]
    assert postfix2infix("A B +") == "A+B"


@pytest.mark.parametrize(
    "postfix, message",
    [
        ("A+", "Stack underflow"),
        ("AB", "exactly 1 value"),
        ("", "exactly 1 value"),
        ("AB%", "unknown token: '%'"),
        ("A1+", "unknown token: '1'"),
    ],
)
def test_invalid_postfix(postfix: str, message: str) -> None:
    with pytest.raises(RPNError, match=message):
        postfix2infix(postfix)
