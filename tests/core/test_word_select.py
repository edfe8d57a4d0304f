import pytest

from hp45_core.core.state import Hp45CpuState
from hp45_core.core.word_select import WordSelect, field_range, resolve_field

@pytest.mark.parametrize("mode, expected", [
    (WordSelect.M, (3, 12)),
    (WordSelect.X, (0, 2)),
    (WordSelect.W, (0, 13)),
    (WordSelect.MS, (3, 13)),
    (WordSelect.XS, (2, 2)),
    (WordSelect.S, (13, 13)),
])
def test_fixed_fields(mode, expected):
    for p in range(16):
        assert resolve_field(p, mode) == expected

def test_pointer_field():
    assert resolve_field(5, WordSelect.P) == (5, 5)
    assert resolve_field(0, WordSelect.P) == (0, 0)

def test_word_through_pointer():
    assert resolve_field(7, WordSelect.WP) == (0, 7)
    assert resolve_field(13, WordSelect.WP) == (0, 13)

def test_whole_word_ignores_pointer():
    assert resolve_field(0, 3) == (0, 13)
    assert resolve_field(11, 3) == (0, 13)

def test_mode_uses_low_three_bits():
    assert resolve_field(4, 0b1011) == (0, 13)

def test_field_range_uses_state():
    state = Hp45CpuState(p=4, word_select=WordSelect.WP)
    assert list(field_range(state)) == [0, 1, 2, 3, 4]

def test_field_range_clips_pointer_beyond_register():
    # P=14/15 は存在しない桁を指す
    state = Hp45CpuState(p=15, word_select=WordSelect.P)
    assert list(field_range(state)) == []
    state.word_select = WordSelect.WP
    assert list(field_range(state)) == list(range(14))
