import regex as re

from .errors import RPNError
from .scanner import PRECEDENCE, is_operand

_TOKEN_PATTERN = re.compile(r"\S")

# Operands never need parentheses.
_OPERAND_PRECEDENCE = 0


def tokenize(expr: str) -> list[str]:
    return _TOKEN_PATTERN.findall(expr)


def _wrap(text: str, needs_parentheses: bool) -> str:
    return f"({text})" if needs_parentheses else text


def postfix2infix(expr: str) -> str:
    """
    Converts a postfix expression string to an infix string.

    Only the parentheses required by precedence and left-to-right
    evaluation are emitted.

    Args:
        expr: The postfix expression string, e.g. ``AB+CD-/``.

    Returns:
        The equivalent infix expression, e.g. ``(A+B)/(C-D)``.

    Raises:
        RPNError: If the expression is invalid.
    """
    stack: list[tuple[str, int]] = []

    for i, token in enumerate(tokenize(expr)):
        if token in PRECEDENCE:
            if len(stack) < 2:
                raise RPNError(
                    f"Stack underflow for operator '{token}' at token {i}. Need 2, have {len(stack)}."
                )
            right, right_precedence = stack.pop()
            left, left_precedence = stack.pop()
            precedence = PRECEDENCE[token]
            stack.append(
                (
                    _wrap(left, left_precedence > precedence)
                    + token
                    + _wrap(right, right_precedence >= precedence),
                    precedence,
                )
            )
            continue

        if is_operand(token):
            stack.append((token, _OPERAND_PRECEDENCE))
            continue

        raise RPNError(f"Invalid or unknown token: '{token}' at position {i}.")

    if len(stack) != 1:
        raise RPNError(
            f"Stack must have exactly 1 value at the end, but has {len(stack)}. Leftovers: {[text for text, _ in stack]}"
        )
    return stack.pop()[0]
