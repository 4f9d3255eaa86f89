import dataclasses

import pytest

from flut.models import FontCfg, HorizontalAlign, PlaySound, Slant, VerticalAlign


def test_font_cfg_defaults():
    cfg = FontCfg()
    assert cfg.font_family == "Arial"
    assert cfg.font_size == 12
    assert cfg.font_slant is Slant.UPRIGHT
    assert cfg.font_weight == 400


def test_font_cfg_is_hashable_key():
    cache = {FontCfg(font_size=32): "big"}
    assert cache[FontCfg(font_size=32)] == "big"
    assert FontCfg(font_size=32) != FontCfg()


def test_font_cfg_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        FontCfg().font_size = 20


def test_font_cfg_size_range():
    with pytest.raises(ValueError):
        FontCfg(font_size=256)
    with pytest.raises(ValueError):
        FontCfg(font_size=-1)


def test_align_order():
    assert [HorizontalAlign(a.value).name for a in HorizontalAlign] == ["LEFT", "CENTER", "RIGHT"]
    assert [VerticalAlign(a.value).name for a in VerticalAlign] == ["TOP", "CENTER", "BOTTOM"]


def test_play_sound_equality():
    assert PlaySound("a.wav") == PlaySound("a.wav")
    assert {PlaySound("a.wav"), PlaySound("a.wav")} == {PlaySound("a.wav")}