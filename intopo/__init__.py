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

import logging

from .errors import (
    AmbiguousOrDisconnectedTree,
    InfixError,
    MalformedExpression,
    RPNError,
    StructuralAmbiguity,
    UnbalancedParentheses,
    UnknownOperator,
)
from .infix2postfix import Trace, infix2postfix, interpret, postorder, trace
from .postfix2infix import postfix2infix
from .scanner import PRECEDENCE, Operator, OperatorToken, scan
from .tree import Leaf, OperatorNode, TreeNode, build_tree, render

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.0.1"

__all__ = [
    "infix2postfix",
    "interpret",
    "postfix2infix",
    "trace",
    "Trace",
    "postorder",
    "scan",
    "build_tree",
    "render",
    "Operator",
    "OperatorToken",
    "PRECEDENCE",
    "Leaf",
    "OperatorNode",
    "TreeNode",
    "InfixError",
    "UnknownOperator",
    "UnbalancedParentheses",
    "MalformedExpression",
    "StructuralAmbiguity",
    "AmbiguousOrDisconnectedTree",
    "RPNError",
]
