import pytest

from labkit.expression import ExpressionError, ExpressionEvaluator, evaluate, main


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3 + 5", 3 + 5),
        ("10 + 2 * 6", 10 + 2 * 6),
        ("100 * (2 + 12) / 14", 100 * (2 + 12) / 14),
        ("3 + (4 - 1) * 5", 3 + (4 - 1) * 5),
        ("-3 + 2", -3 + 2),
        ("2 + 3.5 * 2", 2 + 3.5 * 2),
        ("((1+2)*3)-(4/2)+7", ((1 + 2) * 3) - (4 / 2) + 7),
        ("--3", --3),
        ("8 - 3 - 2", 8 - 3 - 2),
        ("12 / 4 / 3", 12 / 4 / 3),
        (".5 * 4", 0.5 * 4),
        ("  7  ", 7),
    ],
)
def test_evaluates_like_python(text, expected):
    assert evaluate(text) == pytest.approx(expected)


def test_error_is_a_value_error():
    with pytest.raises(ValueError):
        evaluate("abc")


def test_evaluator_is_reusable_after_error():
    evaluator = ExpressionEvaluator()
    with pytest.raises(ExpressionError):
        evaluator.evaluate("(")
    assert evaluator.evaluate("6 * 7") == 6 * 7


def test_main_with_arguments(capsys):
    assert main(["3 + 5", "1/0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Expression: 3 + 5 = 8", 'Error in "1/0": Division by zero']


def test_main_default_set(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert all(line.startswith("Expression: ") for line in lines)