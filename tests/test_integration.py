import pytest

from labkit.integration import main, simpsons, trapezoidal


def square(x):
    return x * x


def test_simpsons_exact_for_square():
    assert simpsons(square, 0.0, 3.0, 10) == pytest.approx(9.0)


@pytest.mark.parametrize("a, b", [(0.0, 3.0), (-2.0, 5.0), (1.0, 1.5)])
def test_trapezoidal_exact_for_constant(a, b):
    assert trapezoidal(lambda x: 1.0, a, b, 7) == pytest.approx(b - a)


def test_trapezoidal_overestimates_convex_function():
    assert trapezoidal(square, 0.0, 3.0, 10) > 9.0


def test_trapezoidal_converges():
    errors = [abs(trapezoidal(square, 0.0, 3.0, n) - 9.0) for n in (4, 16, 64)]
    assert errors == sorted(errors, reverse=True)
    assert errors[-1] < errors[0]


def test_simpsons_odd_intervals_rounded_up():
    with pytest.warns(RuntimeWarning, match="even number of intervals"):
        odd = simpsons(lambda x: x ** 4, 0.0, 2.0, 5)
    assert odd == pytest.approx(simpsons(lambda x: x ** 4, 0.0, 2.0, 6))


@pytest.mark.parametrize("rule", [trapezoidal, simpsons])
def test_non_positive_intervals_rejected(rule):
    with pytest.raises(ValueError):
        rule(square, 0.0, 1.0, 0)


def test_main(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Using 10 intervals:" in out
    assert "Exact Result            = 9.000000" in out
    assert "Simpson's Rule Result   = 9.000000" in out