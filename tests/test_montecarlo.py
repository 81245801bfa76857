import math
import random

import pytest

from labkit.montecarlo import estimate_pi, main


class ConstantRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_all_points_at_origin_are_inside():
    assert estimate_pi(10, ConstantRandom(0.0)) == 4.0


def test_all_points_at_far_corner_are_outside():
    assert estimate_pi(10, ConstantRandom(1.0)) == 0.0


def test_result_is_bounded_and_a_count_fraction():
    n = 1000
    value = estimate_pi(n, random.Random(7))
    assert 0.0 <= value <= 4.0
    count = value * n / 4
    assert count == pytest.approx(round(count))


def test_same_seed_gives_same_estimate():
    first = estimate_pi(500, random.Random(3))
    second = estimate_pi(500, random.Random(3))
    assert first == second
    assert first == pytest.approx(math.pi, abs=0.5)


def test_large_sample_approaches_pi():
    assert estimate_pi(200_000, random.Random(42)) == pytest.approx(math.pi, abs=0.05)


@pytest.mark.parametrize("total", [0, -5])
def test_non_positive_sample_count_rejected(total):
    with pytest.raises(ValueError):
        estimate_pi(total)


def test_main_prints_five_runs(capsys):
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Monte Carlo Pi Estimation:\n")
    lines = [line for line in out.splitlines() if line.startswith("Samples: ")]
    assert len(lines) == 5
    assert "Samples: 1000000" not in out