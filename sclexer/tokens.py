"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of token; each value is the label used when a token is printed."""

    IDENTIFIER = "Identifier"
    INTEGER = "Integer"
    SINTEGER = "Signed Integer"
    CHARACTER = "Character"
    STRING = "String"
    FLOAT = "Float"
    SFLOAT = "Signed Float"
    VOID = "Void"
    CONDITION = "Condition"
    LOOP = "Loop"
    RETURN = "Return"
    BREAK = "Break"
    STRUCT = "Struct"
    ARITHMETIC_OP = "Arithmetic Operator"
    LOGIC_OP = "Logic Operator"
    RELATIONAL_OP = "Relational Operator"
    ASSIGNMENT_OP = "Assignment Operator"
    ACCESS_OP = "Access Operator"
    BRACES = "Braces"
    CONSTANT = "Constant"
    QUOTATION_MARK = "Quotation Mark"
    INCLUSION = "Inclusion"
    COMMENT_CONTENT = "Comment Content"
    COMMENT_START = "Comment Start"
    COMMENT_END = "Comment End"
    ERROR = "Invalid Identifier"

    @property
    def label(self) -> str:
        """Human-readable name of the token kind."""
        return self.value


@dataclass(frozen=True)
class Token:
    """A lexical token with its text and the line it was found on."""

    type: TokenType
    value: str | None
    line: int

    def format(self) -> str:
        """Render the token as one report line."""
        if self.type is TokenType.ERROR:
            return (
                f"Line : {self.line} Error in Token Text: {self.value} "
                f"Token Type: {self.type.label}"
            )
        if self.value is None:
            return f"Line : {self.line} Token Type: {self.type.label} (null value)"
        return (
            f"Line : {self.line} Token Text: {self.value} "
            f"Token Type: {self.type.label}"
        )