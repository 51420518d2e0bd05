import pytest

from blockfall.app import color_for, main, preview_position


def test_background_colour_is_black():
    assert color_for(0) == (0, 0, 0)


def test_orange_colour():
    assert color_for(5) == (255, 165, 0)


def test_piece_colours_are_distinct():
    colours = [color_for(i) for i in range(1, 8)]
    assert len(set(colours)) == 7
    assert (0, 0, 0) not in colours


@pytest.mark.parametrize("color_id", [-1, 8])
def test_unknown_colour_rejected(color_id):
    with pytest.raises(ValueError):
        color_for(color_id)


def test_preview_steps_are_half_a_block():
    x0, y0 = preview_position(3, 1)
    x2, _ = preview_position(5, 1)
    _, y2 = preview_position(3, 3)
    assert x2 - x0 == 35
    assert y2 - y0 == 35


def test_preview_anchor():
    assert preview_position(3, 1)[1] == 140


def test_preview_truncates_toward_zero():
    x0, _ = preview_position(3, 1)
    xm, _ = preview_position(2, 1)
    xp, _ = preview_position(4, 1)
    assert x0 - xm == xp - x0


def test_main_fails_without_assets(tmp_path, capsys):
    assert main(["--assets", str(tmp_path)]) == 1
    assert "missing asset" in capsys.readouterr().err