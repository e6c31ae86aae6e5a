"""PID and IV generation for shiny genderless encounters.

The search walks every possible shiny PID for a trainer in an order picked
from a start seed. It keeps the first one that the games' generators could
have produced.
"""

from .generators import WANTED_NATURE_SHINY_TABLE, GeneratedMon
from .lcg import (
    MASK32,
    NUM_NATURES,
    nature_of,
    normalize_position,
    search_specific_low_pid,
    search_specific_low_pid_colo,
)

NUM_DIFFERENT_PSV = 0x10000 >> 3
MAX_IV = 0x1F


def _check_nature(wanted_nature):
    if not 0 <= wanted_nature < NUM_NATURES:
        raise ValueError(f"nature must be in [0, {NUM_NATURES}), got {wanted_nature}")


def _check_iv(name, value):
    if not 0 <= value <= MAX_IV:
        raise ValueError(f"{name} must be in [0, {MAX_IV}], got {value}")


def shiny_pid_candidates(wanted_nature, tsv, start_seed):
    """Yield every shiny PID of the wanted nature for ``tsv``, once each.

    The order of the walk over the PID's high half is picked from ``start_seed``.
    """
    _check_nature(wanted_nature)
    tsv &= 0xFFFF
    start_seed &= MASK32
    increment = 1 << ((start_seed >> 16) & 3)
    if not (start_seed >> 18) & 1:
        increment = -increment
    pos = initial = start_seed >> 19
    for _ in range(NUM_DIFFERENT_PSV):
        high = (pos << 3) & 0xFFF8
        low = (high ^ tsv) & 0xFFF8
        nature = nature_of((high << 16) | low)
        adjust = WANTED_NATURE_SHINY_TABLE[(wanted_nature - nature) % NUM_NATURES]
        low |= adjust & 0x7
        high |= (adjust >> 4) & 0x7
        yield (high << 16) | low
        pos, initial = normalize_position(pos, initial, increment, NUM_DIFFERENT_PSV)


def generate_static_shiny_info(wanted_nature, tsv, start_seed):
    """Shiny static encounter of the wanted nature from the handheld generator.

    Returns ``None`` when no PID fits.
    """
    base_pos = start_seed & 0xFF
    for pid in shiny_pid_candidates(wanted_nature, tsv, start_seed):
        found = search_specific_low_pid(pid, base_pos)
        if found is not None:
            return GeneratedMon(*found)
    return None


def generate_shadow_shiny_info_colo(wanted_nature, tsv, start_seed):
    """Shiny genderless shadow Pokémon of the wanted nature as generated by Colosseum."""
    base_pos = start_seed & 0xFF
    for pid in shiny_pid_candidates(wanted_nature, tsv, start_seed):
        found = search_specific_low_pid_colo(pid, base_pos)
        if found is not None:
            return GeneratedMon(*found)
    return None


def convert_shiny_roamer_to_colo_info(wanted_nature, hp_ivs, atk_ivs, tsv, start_seed):
    """Shiny console shadow Pokémon keeping a roamer's HP IVs and low Attack IV bits."""
    _check_iv("hp_ivs", hp_ivs)
    _check_iv("atk_ivs", atk_ivs)
    limited = (hp_ivs | ((atk_ivs & 7) << 5)) & 0xFF
    base_pos = start_seed & 0xFF
    for pid in shiny_pid_candidates(wanted_nature, tsv, start_seed):
        found = search_specific_low_pid_colo(pid, base_pos, limited)
        if found is not None:
            return GeneratedMon(*found)
    return None