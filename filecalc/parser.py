from dataclasses import dataclass
from typing import Callable, cast

from filecalc.arithmetic import CalcRuntimeError, add, divide, multiply, negate, power, subtract
from filecalc.tokenizer import Token, TokenType, tokenize
from filecalc.value import Value


@dataclass
class CalcError(Exception):
    """The first fault found in the source; position is 1-based"""

    errmsg: str
    code: str
    position: int

    def __str__(self) -> str:
        error_idx = self.position - 1
        line_start = self.code.rfind("\n", 0, error_idx) + 1
        line_end = self.code.find("\n", line_start)
        if line_end == -1:
            line_end = len(self.code)
        line_number = self.code.count("\n", 0, line_start) + 1
        return "\n".join(
            [
                f"[Error at {self.position}, line {line_number}] {self.errmsg}",
                self.code[line_start:line_end],
                " " * (error_idx - line_start) + "^",
            ]
        )


BINARY_OPERATIONS: dict[TokenType, Callable[[Value, Value], Value]] = {
    TokenType.PLUS: add,
    TokenType.MINUS: subtract,
    TokenType.STAR: multiply,
    TokenType.SLASH: divide,
    TokenType.POW: power,
}


class Parser:
    """Recursive descent parser evaluating as it goes, without building a syntax tree.

    Grammar, loosest binding first:

        expr    := term ( ('+'|'-') term )*
        term    := power ( ('*'|'/') power )*
        power   := unary ( '**' power )?
        unary   := ('+'|'-') unary | primary
        primary := NUMBER | '(' expr ')'

    Unary operators bind tighter than '**', so -2**2 is (-2)**2.
    """

    def __init__(self, code: str):
        self.code = code
        self._tokens = tokenize(code)
        self.current: Token = next(self._tokens)

    def parse(self) -> Value:
        result = self._expr()
        if self.current.type is not TokenType.EOF:
            raise self._error(f"Unexpected {self.current.type} after expression", self.current)
        return result

    def _advance(self) -> None:
        if self.current.type is not TokenType.EOF:
            self.current = next(self._tokens)

    def _error(self, errmsg: str, token: Token) -> CalcError:
        return CalcError(errmsg, code=self.code, position=token.position)

    def _apply(self, operator: Token, left: Value, right: Value) -> Value:
        try:
            return BINARY_OPERATIONS[operator.type](left, right)
        except CalcRuntimeError as e:
            raise self._error(e.errmsg, operator) from e

    def _expr(self) -> Value:
        result = self._term()
        while self.current.type in (TokenType.PLUS, TokenType.MINUS):
            operator = self.current
            self._advance()
            right = self._term()
            result = self._apply(operator, result, right)
        return result

    def _term(self) -> Value:
        result = self._power()
        while self.current.type in (TokenType.STAR, TokenType.SLASH):
            operator = self.current
            self._advance()
            right = self._power()
            result = self._apply(operator, result, right)
        return result

    def _power(self) -> Value:
        base = self._unary()
        if self.current.type is not TokenType.POW:
            return base
        operator = self.current
        self._advance()
        exponent = self._power()  # recursing rather than looping makes '**' right-associative
        return self._apply(operator, base, exponent)

    def _unary(self) -> Value:
        if self.current.type is TokenType.PLUS:
            self._advance()
            return self._unary()
        elif self.current.type is TokenType.MINUS:
            self._advance()
            return negate(self._unary())
        else:
            return self._primary()

    def _primary(self) -> Value:
        token = self.current
        if token.type is TokenType.NUMBER:
            self._advance()
            return cast(Value, token.value)
        elif token.type is TokenType.BRACKET_OPEN:
            self._advance()
            inside = self._expr()
            if self.current.type is not TokenType.BRACKET_CLOSE:
                raise self._error(f"Closing bracket expected, found {self.current.type}", self.current)
            self._advance()
            return inside
        elif token.type is TokenType.EOF:
            raise self._error("Unexpected end of input", token)
        else:
            raise self._error(f"Number or opening bracket expected, found {token.type} {token.lexeme!r}", token)
