"""Tests for the static body catalog."""

import pytest

from solarscope.catalog import (
    ALL_BODIES,
    DWARF_PLANETS,
    MOONS,
    PLANETS,
    SUN,
    get_body_by_id,
    moons_for_parent,
    preset_dates,
    search_bodies,
)


def test_catalog_counts():
    assert SUN.id == "sun"
    assert len(PLANETS) == 8
    assert len(DWARF_PLANETS) == 5
    assert len(MOONS) == 19
    assert len(ALL_BODIES) == 33


def test_ids_unique():
    ids = [b.id for b in ALL_BODIES]
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize("moon", MOONS, ids=lambda b: b.id)
def test_moons_orbit_a_cataloged_planet(moon):
    parent = get_body_by_id(moon.parent_id)
    assert parent is not None and parent.type == "planet"


def test_elements_are_physically_sane():
    for body in ALL_BODIES:
        assert 0.0 <= body.eccentricity < 0.45
        assert body.radius > 0


def test_fields_parsed():
    venus = get_body_by_id("venus")
    assert venus.rotation_period == -5832.5
    assert venus.temperature.min == venus.temperature.max == 462
    assert get_body_by_id("saturn").has_rings
    assert not get_body_by_id("earth").has_rings
    assert get_body_by_id("triton").orbital_period < 0
    assert get_body_by_id("mars").description.endswith('"Red Planet".')
    assert len(get_body_by_id("earth").facts) == 4


def test_lookup_miss_returns_none():
    assert get_body_by_id("vulcan") is None


def test_moons_for_parent():
    assert [m.id for m in moons_for_parent("mars")] == ["phobos", "deimos"]
    assert moons_for_parent("mercury") == ()


def test_search_groups_by_type():
    groups = search_bodies("MOON")
    assert list(groups) == ["moon"]
    assert [b.id for b in groups["moon"]] == ["moon"]


def test_search_matches_substring_across_types():
    groups = search_bodies("ur")
    assert [b.id for b in groups["planet"]] == ["mercury", "saturn", "uranus"]
    assert "star" not in groups


def test_search_empty_and_missing():
    assert list(search_bodies("")) == ["star", "planet", "dwarf-planet", "moon"]
    assert search_bodies("zzz") == {}


def test_preset_dates_today_first():
    presets = preset_dates()
    assert next(iter(presets)) == "Today"
    assert presets["Moon Landing (1969)"].year == 1969
