import logging
from dataclasses import dataclass
from enum import StrEnum

import regex as re

from .errors import MalformedExpression, UnbalancedParentheses, UnknownOperator

logger = logging.getLogger(__name__)


class Operator(StrEnum):
    """
    Binary operators understood by the converter.

    Attributes:
        ADD: Addition.
        SUBTRACT: Subtraction.
        MULTIPLY: Multiplication.
        DIVIDE: Division.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


# Lower number binds tighter.
PRECEDENCE: dict[str, int] = {
    Operator.ADD: 2,
    Operator.SUBTRACT: 2,
    Operator.MULTIPLY: 1,
    Operator.DIVIDE: 1,
}

OPEN_PAREN = "("
CLOSE_PAREN = ")"

_CHAR_PATTERN = re.compile(r"\S")
_OPERAND_PATTERN = re.compile(r"[A-Za-z]")


@dataclass(frozen=True)
class OperatorToken:
    symbol: Operator
    precedence: int
    depth: int
    position: int = -1

    def binds_tighter_than(self, other: "OperatorToken") -> bool:
        return self.precedence < other.precedence

    def __str__(self) -> str:
        return f"{self.symbol}(depth={self.depth}, precedence={self.precedence})"


def is_operand(char: str) -> bool:
    return _OPERAND_PATTERN.fullmatch(char) is not None


def make_token(char: str, depth: int, position: int = -1) -> OperatorToken:
    """
    Create the token for an operator character found at the given depth.

    Raises:
        UnknownOperator: If the character has no precedence entry.
    """
    if char not in PRECEDENCE:
        raise UnknownOperator(char, position if position >= 0 else None)
    return OperatorToken(Operator(char), PRECEDENCE[char], depth, position)


def scan(infix: str) -> tuple[str, list[OperatorToken]]:
    """
    Split an infix expression into its operands and operator tokens.

    Parentheses are consumed to compute the depth recorded on each operator
    token and are not returned. Whitespace is ignored.

    Args:
        infix: Input infix expression.

    Returns:
        The operand characters in source order and the operator tokens in
        source order.

    Raises:
        UnknownOperator: If a character is not an operand, an operator or a parenthesis.
        UnbalancedParentheses: If a ')' has no matching '(' or a '(' is never closed.
        MalformedExpression: If operands and operators do not alternate.
    """
    operands: list[str] = []
    tokens: list[OperatorToken] = []
    open_positions: list[int] = []
    expect_operand = True

    for match in _CHAR_PATTERN.finditer(infix):
        char = match.group()
        pos = match.start()

        if is_operand(char):
            if not expect_operand:
                raise MalformedExpression(
                    f"Operand '{char}' must be separated from the previous operand by an operator",
                    pos,
                )
            operands.append(char)
            expect_operand = False
        elif char == OPEN_PAREN:
            if not expect_operand:
                raise MalformedExpression("'(' cannot follow an operand", pos)
            open_positions.append(pos)
        elif char == CLOSE_PAREN:
            if not open_positions:
                raise UnbalancedParentheses("')' has no matching '('", pos)
            if expect_operand:
                raise MalformedExpression("')' must follow an operand", pos)
            open_positions.pop()
        else:
            token = make_token(char, len(open_positions), pos)
            if expect_operand:
                raise MalformedExpression(
                    f"Operator '{char}' is missing its left operand", pos
                )
            tokens.append(token)
            expect_operand = True

    if open_positions:
        raise UnbalancedParentheses("'(' is never closed", open_positions[-1])
    if expect_operand:
        if not operands:
            raise MalformedExpression("Expression is empty")
        raise MalformedExpression(
            "Expression ends without an operand", len(infix.rstrip())
        )

    logger.debug(
        "Scanned %r: operands=%s operators=%s",
        infix,
        "".join(operands),
        " ".join(str(t) for t in tokens),
    )
    return "".join(operands), tokens
