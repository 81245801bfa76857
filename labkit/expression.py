"""Recursive-descent evaluator for arithmetic expressions."""

from __future__ import annotations

import argparse
import re
import sys

_END = "\0"
_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

DEMO_EXPRESSIONS = (
    "3 + 5",
    "10 + 2 * 6",
    "100 * (2 + 12) / 14",
    "3 + (4 - 1) * 5",
    "-3 + 2",
    "2 + 3.5 * 2",
    "((1+2)*3)-(4/2)+7",
)


class ExpressionError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""


class ExpressionEvaluator:
    """Evaluates expressions with + - * /, parentheses and unary minus."""

    def __init__(self) -> None:
        self._text = ""
        self._pos = 0

    def evaluate(self, text: str) -> float:
        """Evaluate ``text`` and return its value."""
        self._text = text
        self._pos = 0
        result = self._expression()
        if self._peek() != _END:
            raise ExpressionError("Unexpected character at end")
        return result

    def _peek(self) -> str:
        while self._pos < len(self._text) and self._text[self._pos] in _SPACE:
            self._pos += 1
        return self._text[self._pos] if self._pos < len(self._text) else _END

    def _get(self) -> str:
        ch = self._peek()
        self._pos += 1
        return ch

    def _number(self) -> float:
        start = self._pos
        while self._pos < len(self._text) and self._text[self._pos] in _DIGITS + ".":
            self._pos += 1
        match = _NUMBER.match(self._text[start:self._pos])
        if match is None:
            raise ExpressionError("Invalid number")
        return float(match.group())

    def _factor(self) -> float:
        ch = self._peek()
        if ch == "(":
            self._get()
            value = self._expression()
            if self._get() != ")":
                raise ExpressionError("Expected ')'")
            return value
        if ch == "-":
            self._get()
            return -self._factor()
        if ch in _DIGITS or ch == ".":
            return self._number()
        raise ExpressionError("Invalid factor")

    def _term(self) -> float:
        result = self._factor()
        while (op := self._peek()) in ("*", "/"):
            self._get()
            operand = self._factor()
            if op == "*":
                result *= operand
            else:
                if operand == 0:
                    raise ExpressionError("Division by zero")
                result /= operand
        return result

    def _expression(self) -> float:
        result = self._term()
        while (op := self._peek()) in ("+", "-"):
            self._get()
            operand = self._term()
            result = result + operand if op == "+" else result - operand
        return result


def evaluate(text: str) -> float:
    """Evaluate an arithmetic expression."""
    return ExpressionEvaluator().evaluate(text)


def main(argv: list[str] | None = None) -> int:
    """Evaluate the given expressions, or a built-in set when none are given."""
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions.")
    parser.add_argument("expressions", nargs="*", help="expressions to evaluate")
    args = parser.parse_args(argv)
    evaluator = ExpressionEvaluator()
    for text in args.expressions or DEMO_EXPRESSIONS:
        try:
            print(f"Expression: {text} = {evaluator.evaluate(text):g}")
        except ExpressionError as error:
            print(f'Error in "{text}": {error}')
    return 0


if __name__ == "__main__":
    sys.exit(main())