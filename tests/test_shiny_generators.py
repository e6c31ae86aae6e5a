import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gen3trade.lcg import nature_of, search_specific_low_pid, search_specific_low_pid_colo
from gen3trade.shiny_generators import (
    NUM_DIFFERENT_PSV,
    convert_shiny_roamer_to_colo_info,
    generate_shadow_shiny_info_colo,
    generate_static_shiny_info,
    shiny_pid_candidates,
)


def shiny_value(pid, tsv):
    return (pid >> 16) ^ (pid & 0xFFFF) ^ tsv


natures = st.integers(min_value=0, max_value=24)
tsvs = st.integers(min_value=0, max_value=0xFFFF)
seeds = st.integers(min_value=0, max_value=0xFFFFFFFF)


@pytest.mark.parametrize(
    "nature,tsv,seed",
    [(0, 0x2088, 0x36810000), (1, 0xD840, 0xE07A0000), (4, 0xC090, 0xC30B0000), (12, 0, 0)],
)
def test_candidates_are_shiny_with_wanted_nature(nature, tsv, seed):
    pids = list(shiny_pid_candidates(nature, tsv, seed))
    assert len(pids) == NUM_DIFFERENT_PSV
    assert all(shiny_value(pid, tsv) < 8 for pid in pids)
    assert all(nature_of(pid) == nature for pid in pids)


@pytest.mark.parametrize("seed", [0, 0x36810000, 0xE07A0000, 0xFFFFFFFF, 0x00050000])
def test_candidates_cover_every_high_half_once(seed):
    highs = [pid >> 19 for pid in shiny_pid_candidates(3, 0x1234, seed)]
    assert sorted(highs) == list(range(NUM_DIFFERENT_PSV))


@given(seeds)
@settings(max_examples=30, deadline=None)
def test_first_candidate_starts_at_seed_position(seed):
    first = next(shiny_pid_candidates(7, 0xABCD, seed))
    assert first >> 19 == seed >> 19


def test_invalid_nature_rejected():
    with pytest.raises(ValueError):
        list(shiny_pid_candidates(25, 0, 0))
    with pytest.raises(ValueError):
        generate_static_shiny_info(-1, 0, 0)


def test_invalid_roamer_ivs_rejected():
    with pytest.raises(ValueError):
        convert_shiny_roamer_to_colo_info(0, 32, 0, 0, 0)
    with pytest.raises(ValueError):
        convert_shiny_roamer_to_colo_info(0, 0, 40, 0, 0)


@given(natures, tsvs, seeds)
@settings(max_examples=15, deadline=None)
def test_static_shiny_matches_handheld_search(nature, tsv, seed):
    result = generate_static_shiny_info(nature, tsv, seed)
    assert result is not None
    assert nature_of(result.pid) == nature
    assert shiny_value(result.pid, tsv) < 8
    assert search_specific_low_pid(result.pid, seed & 0xFF) == (result.pid, result.ivs)
    assert result.ability == 0


@given(natures, tsvs, seeds)
@settings(max_examples=15, deadline=None)
def test_shadow_shiny_matches_console_search(nature, tsv, seed):
    result = generate_shadow_shiny_info_colo(nature, tsv, seed)
    assert result is not None
    assert nature_of(result.pid) == nature
    assert shiny_value(result.pid, tsv) < 8
    assert search_specific_low_pid_colo(result.pid, seed & 0xFF) == (
        result.pid,
        result.ivs,
        result.ability,
    )


@given(
    natures,
    st.integers(min_value=0, max_value=31),
    st.integers(min_value=0, max_value=31),
    tsvs,
    seeds,
)
@settings(max_examples=10, deadline=None)
def test_shiny_roamer_keeps_ivs(nature, hp_ivs, atk_ivs, tsv, seed):
    result = convert_shiny_roamer_to_colo_info(nature, hp_ivs, atk_ivs, tsv, seed)
    assert result is not None
    assert nature_of(result.pid) == nature
    assert shiny_value(result.pid, tsv) < 8
    assert result.ivs & 0x1F == hp_ivs
    assert (result.ivs >> 5) & 7 == atk_ivs & 7


def test_generation_is_deterministic():
    first = generate_shadow_shiny_info_colo(1, 0xD840, 0xE07A0000)
    second = generate_shadow_shiny_info_colo(1, 0xD840, 0xE07A0000)
    assert first == second
    assert nature_of(first.pid) == 1