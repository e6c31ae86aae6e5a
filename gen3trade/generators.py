"""PID and IV generation for eggs, static encounters and console shadow Pokémon.

Each search walks the space of possible IVs in an order picked from a start
seed and stops at the first PID/IV pair the games' generators could have
produced for the wanted nature and IVs.
"""

from dataclasses import dataclass

from .lcg import (
    MASK32,
    NUM_NATURES,
    nature_of,
    next_seed,
    next_seed_colo,
    normalize_position,
    prev_seed,
    prev_seed_colo,
    reverse_masked_ivs_seeds_gba3,
    seeds_ivs_colo,
)

M_GENDER = 0
F_GENDER = 1
U_GENDER = 2

NIDORAN_M_GENDER_INDEX = 8
NIDORAN_F_GENDER_INDEX = 9

# Nidoran M is special: it needs 0x8000 set in the lower PID.
GENDER_VALUES = (0x7F, 0, 0x1F, 0x3F, 0xBF, 0xDF, 0, 0, 0x7FFF, 0)

WANTED_NATURE_SHINY_TABLE = (
    0, 1, 2, 3, 4, 5, 6, 7,
    0x30, 0x31, 0x32, 0x33, 0x34, 0x35, 0x36, 0x37,
    0x15, 0x16, 0x17,
    0x40, 0x41, 0x42, 0x43, 0x44, 0x45,
)

MAX_IV = 0x1F


@dataclass(frozen=True)
class GeneratedMon:
    """A generated PID with its packed IVs and ability bit."""

    pid: int
    ivs: int
    ability: int = 0


def _check_nature(wanted_nature):
    if not 0 <= wanted_nature < NUM_NATURES:
        raise ValueError(f"nature must be in [0, {NUM_NATURES}), got {wanted_nature}")


def _check_gender_kind(gender_kind):
    if not 0 <= gender_kind < len(GENDER_VALUES):
        raise ValueError(f"unknown gender kind {gender_kind}")


def _check_iv(name, value):
    if not 0 <= value <= MAX_IV:
        raise ValueError(f"{name} must be in [0, {MAX_IV}], got {value}")


def _shiny_value(pid, tsv):
    return ((pid >> 16) ^ (pid & 0xFFFF) ^ tsv) & 0xFFFF


def _rotation(count, offset):
    """Offsets ``offset, offset - 1, ..., 0, count - 1, ..., offset + 1``."""
    return ((offset - step) % count for step in range(count))


def determine_lower_pid_gendered(lower_pid, gender, gender_kind):
    """Adjust the lower PID half so that it yields ``gender`` for ``gender_kind``."""
    _check_gender_kind(gender_kind)
    lower_pid &= 0xFFFF
    threshold = GENDER_VALUES[gender_kind]
    if threshold:
        if gender == M_GENDER and (lower_pid & 0xFF) < threshold:
            lower_pid |= threshold + 1
        elif gender == F_GENDER and (lower_pid & 0xFF) >= threshold:
            lower_pid = (lower_pid & 0xFF00) | (lower_pid & threshold)
            if (lower_pid & 0xFF) == threshold:
                lower_pid -= 1
    elif gender_kind == NIDORAN_F_GENDER_INDEX:
        lower_pid &= 0x7FFF
    return lower_pid & 0xFFFF


def generate_egg_shiny_info(wanted_nature, tsv, gender, gender_kind, start_seed):
    """Build a shiny egg PID of the wanted nature and gender, with its IVs."""
    _check_nature(wanted_nature)
    start_seed &= MASK32
    tsv &= 0xFFFF
    lower = determine_lower_pid_gendered(start_seed & 0xFFFF, gender, gender_kind) & 0xFFF8
    if lower == 0:
        lower = 0x200
    if lower == 0xFFF8:
        lower -= 0x100
    higher = (lower ^ tsv) & 0xFFF8
    nature = nature_of((higher << 16) | lower)
    adjust = WANTED_NATURE_SHINY_TABLE[(wanted_nature - nature) % NUM_NATURES]
    lower |= adjust & 0x7
    higher |= (adjust >> 4) & 0x7
    pid = (higher << 16) | lower
    seed = next_seed((higher << 16) | (start_seed >> 16))
    ivs = ((seed >> 16) & 0x7FFF) | (((next_seed(seed) >> 16) & 0x7FFF) << 15)
    return GeneratedMon(pid, ivs)


def _high_iv_candidates(spe_ivs, min_sum, width, start_seed, spd_mask):
    """High IV words whose Sp.Atk and Sp.Def sum lies in ``[min_sum, min_sum + width)``."""
    limit_sum = min_sum + width
    limit = min(limit_sum, 0x20)
    start = min_sum - 0x1F if min_sum >= 0x1F else 0
    count = limit - start
    base_spe = start_seed & 1
    base_spd = (start_seed >> 1) & spd_mask
    for spa_offset in _rotation(count, (start_seed >> 16) % count):
        spa = start + spa_offset
        base_spd_ivs = max(min_sum - spa, 0)
        spd_count = min(limit_sum - spa, 0x20) - base_spd_ivs
        for spd_offset in _rotation(spd_count, base_spd % spd_count):
            spd = base_spd_ivs + spd_offset
            for flip in (0, 1):
                spe = spe_ivs + (flip ^ base_spe)
                yield spe | (spa << 5) | (spd << 10)


def _search_genderless(wanted_ivs, start_seed, generator):
    atk = ((wanted_ivs >> 4) & 0xF) << 1
    def_ = (wanted_ivs & 0xF) << 1
    spe = ((wanted_ivs >> 12) & 0xF) << 1
    spa = ((wanted_ivs >> 8) & 0xF) << 1
    base_first = (atk << 5) | (def_ << 10)

    base_atk = (start_seed >> 3) & 1
    base_def = (start_seed >> 4) & 1
    base_hp = (start_seed >> 5) & 0x1F
    increment = ((start_seed >> 11) & 0xF) + 1
    if not (start_seed >> 10) & 1:
        increment = -increment

    for seed_base in _high_iv_candidates(spe, spa * 2, 4, start_seed, 3):
        hps = initial = base_hp
        for _ in range(0x20):
            for atk_flip in (0, 1):
                for def_flip in (0, 1):
                    first = base_first | hps | ((atk_flip ^ base_atk) << 5) | ((def_flip ^ base_def) << 10)
                    result = generator(first, seed_base)
                    if result is not None:
                        return result
            hps, initial = normalize_position(hps, initial, increment, 0x20)
    return None


def _static_candidate(first, second, wanted_nature, tsv):
    for seed in reverse_masked_ivs_seeds_gba3(second, first):
        seed = prev_seed(seed)
        high_ivs = ((seed >> 16) & 0x7FFF) << 15
        seed = prev_seed(seed)
        ivs = high_ivs | ((seed >> 16) & 0x7FFF)
        seed = prev_seed(seed)
        pid = seed & 0xFFFF0000
        seed = prev_seed(seed)
        pid |= seed >> 16
        if nature_of(pid) == wanted_nature and _shiny_value(pid, tsv) >= 8:
            return GeneratedMon(pid, ivs)
    return None


def _colo_ivs_and_ability(seed):
    seed = next_seed_colo(seed)
    low_ivs = (seed >> 16) & 0x7FFF
    seed = next_seed_colo(seed)
    ivs = low_ivs | (((seed >> 16) & 0x7FFF) << 15)
    seed = next_seed_colo(seed)
    return ivs, (seed >> 16) & 1, seed


def _colo_locked_pid(seed, lock_tsv):
    """First console PID after ``seed`` that is not shiny for ``lock_tsv``."""
    while True:
        seed = next_seed_colo(seed)
        high = seed & 0xFFFF0000
        seed = next_seed_colo(seed)
        pid = high | (seed >> 16)
        if _shiny_value(pid, lock_tsv) >= 8:
            return pid


def _shadow_colo_candidate(first, second, wanted_nature, tsv):
    for seed in seeds_ivs_colo(first, second):
        enemy = prev_seed_colo(prev_seed_colo(seed))
        enemy_sid = enemy >> 16
        enemy_tid = prev_seed_colo(enemy) >> 16
        ivs, ability, seed = _colo_ivs_and_ability(seed)
        pid = _colo_locked_pid(seed, enemy_sid ^ enemy_tid)
        if nature_of(pid) == wanted_nature and _shiny_value(pid, tsv) >= 8:
            return GeneratedMon(pid, ivs, ability)
    return None


def _shadow_xd_candidate(first, second, wanted_nature, tsv, check_prev_too):
    for seed in seeds_ivs_colo(first, second):
        if check_prev_too:
            previous = prev_seed_colo(prev_seed_colo(seed))
            ppid_0 = previous >> 16
            ppid_1 = prev_seed_colo(previous) >> 16
            if (ppid_1 ^ ppid_0 ^ tsv) < 8:
                continue
        ivs, ability, seed = _colo_ivs_and_ability(seed)
        pid = _colo_locked_pid(seed, tsv)
        if nature_of(pid) == wanted_nature:
            return GeneratedMon(pid, ivs, ability)
    return None


def generate_static_info(wanted_nature, wanted_ivs, tsv, start_seed):
    """Non-shiny static encounter matching the nature and the upper IV bits.

    Returns ``None`` when no PID/IV pair fits.
    """
    _check_nature(wanted_nature)
    tsv &= 0xFFFF
    return _search_genderless(
        wanted_ivs & 0xFFFF,
        start_seed & MASK32,
        lambda first, second: _static_candidate(first, second, wanted_nature, tsv),
    )


def generate_shadow_info_colo(wanted_nature, wanted_ivs, tsv, start_seed):
    """Non-shiny genderless shadow Pokémon as generated by Colosseum."""
    _check_nature(wanted_nature)
    tsv &= 0xFFFF
    return _search_genderless(
        wanted_ivs & 0xFFFF,
        start_seed & MASK32,
        lambda first, second: _shadow_colo_candidate(first, second, wanted_nature, tsv),
    )


def generate_shadow_info_xd(wanted_nature, check_prev_too, wanted_ivs, tsv, start_seed):
    """Non-shiny genderless shadow Pokémon as generated by XD.

    With ``check_prev_too`` the previously generated PID must not be shiny either.
    """
    _check_nature(wanted_nature)
    tsv &= 0xFFFF
    return _search_genderless(
        wanted_ivs & 0xFFFF,
        start_seed & MASK32,
        lambda first, second: _shadow_xd_candidate(first, second, wanted_nature, tsv, check_prev_too),
    )


def convert_roamer_to_colo_info(wanted_nature, wanted_ivs, hp_ivs, atk_ivs, tsv, start_seed):
    """Console shadow Pokémon keeping a roamer's HP and Attack IVs exactly."""
    _check_nature(wanted_nature)
    _check_iv("hp_ivs", hp_ivs)
    _check_iv("atk_ivs", atk_ivs)
    tsv &= 0xFFFF
    start_seed &= MASK32
    wanted_ivs &= 0xFFFF
    def_ = (wanted_ivs & 0xF) << 1
    spe = ((wanted_ivs >> 12) & 0xF) << 1
    spa = ((wanted_ivs >> 9) & 0x7) << 2
    base_first = hp_ivs | (atk_ivs << 5) | (def_ << 10)
    base_def = (start_seed >> 4) & 1
    for seed_base in _high_iv_candidates(spe, spa * 2, 8, start_seed, 7):
        for def_flip in (0, 1):
            first = base_first | ((def_flip ^ base_def) << 10)
            result = _shadow_colo_candidate(first, seed_base, wanted_nature, tsv)
            if result is not None:
                return result
    return None