from typing import Optional


class InfixError(Exception):
    """Base class for errors raised while converting an infix expression."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            super().__init__(f"Position {position}: {message}")
        else:
            super().__init__(message)


class UnknownOperator(InfixError):
    """A character that is neither an operand, an operator nor a parenthesis."""

    def __init__(self, char: str, position: Optional[int] = None):
        self.char = char
        super().__init__(f"Unknown operator '{char}'", position)


class UnbalancedParentheses(InfixError):
    pass


class MalformedExpression(InfixError):
    pass


class StructuralAmbiguity(InfixError):
    """The operator links do not form a single binary tree."""


class AmbiguousOrDisconnectedTree(StructuralAmbiguity):
    """Zero or several operators were left without a parent."""

    def __init__(self, roots: list[int]):
        self.roots = roots
        if roots:
            message = f"Expected exactly one root operator, found {len(roots)} at token indices {roots}"
        else:
            message = "No root operator found"
        super().__init__(message)


class RPNError(Exception):
    pass
