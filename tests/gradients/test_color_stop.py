import pytest

from chromagrad.colors.rgb import ColorRGBA, NIL
from chromagrad.errors import ColorResolveError, GradientWarning
from chromagrad.gradients.color_stop import parse_color_stop, split_first_word

RED = ColorRGBA((255, 0, 0))
BLUE = ColorRGBA((0, 0, 255))


def test_split_first_word():
    assert split_first_word("red") == ("red", None)
    assert split_first_word("red 50%") == ("red", "50%")
    assert split_first_word("rgb(1, 2, 3) 10%") == ("rgb(1, 2, 3)", "10%")
    assert split_first_word("clearer-50 red 40%") == ("clearer-50", "red 40%")


def test_color_only():
    stop = parse_color_stop("blue", RED)
    assert stop.color == BLUE
    assert stop.offset == 0.0
    assert stop.opacity == 1.0


def test_color_with_offset():
    stop = parse_color_stop("blue 25%", RED)
    assert stop.color == BLUE
    assert stop.offset == pytest.approx(0.25)


def test_functional_color_with_offset():
    stop = parse_color_stop("rgb(1, 2, 3) 0.5")
    assert stop.color.value == (1, 2, 3, 255)
    assert stop.offset == pytest.approx(0.5)


def test_clearer_copies_previous_color():
    stop = parse_color_stop("clearer-25", RED)
    assert stop.color == RED
    assert stop.opacity == pytest.approx(0.75)


def test_clearer_with_offset():
    stop = parse_color_stop("clearer-25 80%", RED)
    assert stop.color == RED
    assert stop.offset == pytest.approx(0.8)


def test_clearer_with_base_color():
    stop = parse_color_stop("clearer-50 blue", RED)
    assert stop.color == BLUE
    assert stop.opacity == pytest.approx(0.5)
    assert stop.offset == 0.0


def test_clearer_with_base_color_and_offset():
    stop = parse_color_stop("clearer-50 blue 40%", RED)
    assert stop.color == BLUE
    assert stop.opacity == pytest.approx(0.5)
    assert stop.offset == pytest.approx(0.4)


def test_clearer_opacity_is_clamped():
    assert parse_color_stop("clearer-150", RED).opacity == 0.0


def test_transparent_keeps_previous_color():
    stop = parse_color_stop("transparent 100%", RED)
    assert stop.color == RED
    assert stop.opacity == 0.0
    assert stop.offset == pytest.approx(1.0)


def test_transparent_without_previous_color():
    stop = parse_color_stop("transparent")
    assert stop.color == NIL
    assert stop.opacity == 0.0


def test_previous_color_is_resolver_context():
    seen = []

    def resolver(token, base):
        seen.append((token, base))
        return BLUE

    parse_color_stop("whatever 10%", RED, resolver)
    assert seen == [("whatever", RED)]


def test_bad_offset_rejects_stop():
    with pytest.warns(GradientWarning, match="offset"):
        assert parse_color_stop("red far", RED) is None


def test_unknown_color_rejects_stop():
    with pytest.warns(GradientWarning, match="invalid color stop"):
        assert parse_color_stop("notacolor 50%", RED) is None


def test_bad_clearer_amount_rejects_stop():
    with pytest.warns(GradientWarning, match="clearer amount 'abc'") as record:
        assert parse_color_stop("clearer-abc", RED) is None
    assert "offset" not in str(record[0].message)


def test_unknown_base_color_after_keyword_rejects_stop():
    with pytest.warns(GradientWarning):
        assert parse_color_stop("clearer-50 notacolor", RED) is None


def test_resolver_errors_become_warnings():
    def resolver(token, base):
        raise ColorResolveError("nope")

    with pytest.warns(GradientWarning):
        assert parse_color_stop("red", RED, resolver) is None
