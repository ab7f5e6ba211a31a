import io
import struct

import pytest

from lierokit.sound import DEFAULT_VOLUME, ChannelTable, read_sounds


def _bank():
    header = struct.pack("<H", 2)
    data_offset = 2 + 2 * 16
    entries = (
        b"SHOT\0\0\0\0" + struct.pack("<II", data_offset, 3)
        + b"EMPTY\0\0\0" + struct.pack("<II", 0, 0)
    )
    return header + entries + bytes([1, 0xFF, 4])


def test_read_sounds():
    sounds = read_sounds(io.BytesIO(_bank()))
    assert len(sounds) == 2
    assert sounds[0].samples == (30, -30, 120)
    assert sounds[0].name == b"SHOT\0\0\0\0"
    assert sounds[1].samples == ()
    assert sounds[0].volume == DEFAULT_VOLUME


def test_pcm_bytes():
    sound = read_sounds(io.BytesIO(_bank()))[0]
    assert sound.pcm == struct.pack("<3h", *sound.samples)
    assert len(sound.pcm) == 2 * len(sound.samples)


def test_truncated_bank():
    with pytest.raises(EOFError):
        read_sounds(io.BytesIO(_bank()[:-1]))


def test_play_uses_free_channels_in_order():
    table = ChannelTable(sound_count=3, channels=2)
    assert table.play(0, 10) == 0
    assert table.play(1, 11) == 1
    assert table.play(2, 12) is None
    assert table.is_playing(10)
    assert not table.is_playing(12)


def test_finish_frees_channel():
    table = ChannelTable(sound_count=3, channels=2)
    table.play(0, 10)
    table.play(1, 11)
    table.finish(0)
    assert not table.is_playing(10)
    assert table.play(2, 12) == 0


def test_stop_by_id():
    table = ChannelTable(sound_count=3)
    table.play(0, 5)
    table.play(1, 5)
    table.play(2, 6)
    table.stop(5)
    assert not table.is_playing(5)
    assert table.is_playing(6)


def test_play_unknown_sound_warns():
    table = ChannelTable(sound_count=1)
    with pytest.warns(RuntimeWarning):
        assert table.play(4, 1) is None
    assert not table.is_playing(1)


def test_play_on_bad_channel():
    table = ChannelTable(sound_count=1, channels=2)
    with pytest.raises(IndexError):
        table.play_on(5, 0, 1)