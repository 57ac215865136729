import random

import pytest

from chromagrad.gradients.gradient import Stop
from chromagrad.gradients.stops import fix_gradient_stops


def make_stops(*offsets):
    return [Stop(offset=o) for o in offsets]


def offsets(stops):
    return [s.offset for s in stops]


def test_empty_list():
    assert fix_gradient_stops([]) == []


def test_returns_same_list():
    stops = make_stops(0, 0)
    assert fix_gradient_stops(stops) is stops


def test_two_unspecified_stops():
    assert offsets(fix_gradient_stops(make_stops(0, 0))) == [0.0, 1.0]


def test_even_spacing_all_unspecified():
    result = offsets(fix_gradient_stops(make_stops(0, 0, 0, 0)))
    assert result == pytest.approx([0.0, 1 / 3, 2 / 3, 1.0])


@pytest.mark.parametrize("k", [1, 2, 3, 5, 8])
def test_even_spacing_property(k):
    stops = make_stops(0, *([0] * k), 1)
    result = offsets(fix_gradient_stops(stops))
    assert result[0] == 0
    assert result[-1] == 1
    for j in range(1, k + 1):
        assert result[j] == pytest.approx(j / (k + 1))


def test_run_between_explicit_stops():
    result = offsets(fix_gradient_stops(make_stops(0, 0.2, 0, 0, 0.8, 0)))
    assert result == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8, 1.0])


def test_separate_runs_are_closed():
    result = offsets(fix_gradient_stops(make_stops(0, 0, 0.5, 0, 1)))
    assert result == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])


def test_final_stop_follows_offsets_past_one():
    result = offsets(fix_gradient_stops(make_stops(0, 1.5, 0)))
    assert result == pytest.approx([0.0, 1.5, 1.5])


def test_offsets_above_one_pass_through():
    result = offsets(fix_gradient_stops(make_stops(0, 0, 2.0)))
    assert result == pytest.approx([0.0, 1.0, 2.0])


def test_first_stop_offset_kept():
    result = offsets(fix_gradient_stops(make_stops(0.3, 0, 0)))
    assert result == pytest.approx([0.3, 0.65, 1.0])


def test_decreasing_explicit_offset_raised():
    result = offsets(fix_gradient_stops(make_stops(0, 0.8, 0.3, 0)))
    assert result == pytest.approx([0.0, 0.8, 0.8, 1.0])


def test_single_stop_becomes_end():
    assert offsets(fix_gradient_stops(make_stops(0))) == [1.0]


def test_idempotent():
    stops = fix_gradient_stops(make_stops(0, 0, 0.4, 0, 0, 0))
    first = offsets(stops)
    assert offsets(fix_gradient_stops(stops)) == first


def test_monotonic_for_random_inputs():
    rng = random.Random(1234)
    for _ in range(200):
        n = rng.randint(2, 9)
        raw = [rng.choice([0.0, 0.0, round(rng.uniform(0, 1.2), 3)]) for _ in range(n)]
        raw[0] = 0.0
        result = offsets(fix_gradient_stops(make_stops(*raw)))
        assert result[0] == 0.0
        assert all(a <= b + 1e-9 for a, b in zip(result, result[1:])), (raw, result)
        again = offsets(fix_gradient_stops(make_stops(*result)))
        assert again == pytest.approx(result)
