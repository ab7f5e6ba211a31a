import pytest

from lierokit.constants import Const, Constants, Hack, Text, load_constants


@pytest.fixture
def consts() -> Constants:
    return load_constants()


def test_every_constant_has_a_value(consts):
    assert set(consts.values) == set(Const)
    assert len(consts.values) == 69


def test_pinned_values(consts):
    assert consts[Const.NR_INITIAL_LENGTH] == 4000
    assert consts[Const.NR_ATTACH_LENGTH] == 450
    assert consts[Const.WORM_FLOAT_POWER] == -8386178
    assert consts[Const.REM_EXP_OBJECT] == 35


def test_colour_and_rect_values(consts):
    assert consts[Const.NR_COLOUR_BEGIN] == 62
    assert consts[Const.NR_COLOUR_END] == 64
    assert consts[Const.BONUS_SPAWN_RECT_W] == 504
    assert consts[Const.BONUS_SPAWN_RECT_H] == 350


def test_every_text_present(consts):
    assert set(consts.texts) == set(Text)


def test_texts(consts):
    assert consts[Text.OK] == "OK"
    assert consts[Text.OK2] == "OK"
    assert consts[Text.PRESS_ANY_KEY] == "Press any key..."
    assert consts[Text.YOURE_IT] == "You're 'IT' now!"
    assert consts[Text.LOADING_AND_THINKING] == "Loading & thinking..."


def test_hacks_all_disabled(consts):
    assert set(consts.hacks) == set(Hack)
    assert all(consts[h] is False for h in Hack)


def test_plain_int_key_rejected(consts):
    with pytest.raises(KeyError) as excinfo:
        consts[3]
    assert excinfo.type is KeyError
    assert consts[Const.JUMP_FORCE] == 56064


def test_loads_are_independent():
    first = load_constants()
    second = load_constants()
    first.values[Const.JUMP_FORCE] = 1
    assert second[Const.JUMP_FORCE] == 56064