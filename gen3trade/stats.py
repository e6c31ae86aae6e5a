"""Values derived from a stored Pokémon's PID, IVs, EVs, origins and Pokérus byte."""

from enum import IntEnum

MASK32 = 0xFFFFFFFF

STATS_TOTAL = 6
HP_STAT_INDEX = 0
MAX_IV = 0x1F
MAX_EV = 0xFF
MAX_EVS = 510
MAX_MET_LEVEL = 100

TRADE_MET = 0xFE
EVENT_MET = 0xFF
COLOSSEUM_CODE = 15

# Display order (HP, Atk, Def, SpA, SpD, Spe) to stored order (HP, Atk, Def, Spe, SpA, SpD).
STAT_INDEX_CONVERSION = (0, 1, 2, 4, 5, 3)

GENDER_THRESHOLDS = (127, 0, 31, 63, 191, 225, 254, 255, 0, 254)
M_GENDER_INDEX = 1
F_GENDER_INDEX = 6
U_GENDER_INDEX = 7
NIDORAN_M_GENDER_INDEX = 8
NIDORAN_F_GENDER_INDEX = 9


class Gender(IntEnum):
    """Gender of a Pokémon or of a trainer."""

    MALE = 0
    FEMALE = 1
    GENDERLESS = 2


class Pokerus(IntEnum):
    """Pokérus state of a Pokémon."""

    NONE = 0
    HAS = 1
    HAD = 2


def _stat_position(stat_index):
    if stat_index < 0:
        raise ValueError(f"stat index must not be negative, got {stat_index}")
    return STAT_INDEX_CONVERSION[min(stat_index, STATS_TOTAL - 1)]


def iv_of(ivs, stat_index):
    """IV of one stat, in display order, from the packed 30-bit IV word.

    Indices past the last stat read the last one.
    """
    return ((ivs & MASK32) >> (5 * _stat_position(stat_index))) & MAX_IV


def _stored_ivs(ivs):
    ivs &= MASK32
    return [(ivs >> (5 * i)) & MAX_IV for i in range(STATS_TOTAL)]


def hidden_power_type(ivs):
    """Hidden Power type index, 0 to 15, for the packed IVs."""
    bits = sum((iv & 1) << i for i, iv in enumerate(_stored_ivs(ivs)))
    return (bits * 15) // ((1 << STATS_TOTAL) - 1)


def hidden_power_power(ivs):
    """Hidden Power base power, 30 to 70, for the packed IVs."""
    bits = sum(((iv >> 1) & 1) << i for i, iv in enumerate(_stored_ivs(ivs)))
    return (bits * 40) // ((1 << STATS_TOTAL) - 1) + 30


def is_shiny(pid, ot_id, is_egg, trainer_id):
    """Whether the PID is shiny for its trainer.

    For an egg the trainer who will hatch it decides, not the original one.
    """
    if is_egg:
        ot_id = trainer_id
    pid &= MASK32
    ot_id &= MASK32
    return ((pid & 0xFFFF) ^ (pid >> 16) ^ (ot_id & 0xFFFF) ^ (ot_id >> 16)) < 8


def ability_num_gen_4_5(pid):
    """Ability slot, 1 or 2, that the PID gives in later generations."""
    return 2 if pid & 1 else 1


def is_ability_valid(abilities, pid, ability_bit, met_location, origin_game):
    """Whether the stored ability bit is legal.

    ``abilities`` packs the species' two abilities, one per byte.
    """
    first = abilities & 0xFF
    second = (abilities >> 8) & 0xFF
    same = first == second
    if same and ability_bit:
        return False
    if not ((pid & 1) ^ (ability_bit & 1)):
        return True
    if met_location in (TRADE_MET, EVENT_MET):
        return True
    if origin_game == COLOSSEUM_CODE:
        return True
    return same


def gender_from_kind(gender_kind, pid):
    """Gender that a species' gender kind and a PID produce."""
    if not 0 <= gender_kind < len(GENDER_THRESHOLDS):
        raise ValueError(f"unknown gender kind {gender_kind}")
    if gender_kind in (M_GENDER_INDEX, NIDORAN_M_GENDER_INDEX):
        return Gender.MALE
    if gender_kind in (F_GENDER_INDEX, NIDORAN_F_GENDER_INDEX):
        return Gender.FEMALE
    if gender_kind == U_GENDER_INDEX:
        return Gender.GENDERLESS
    if (pid & 0xFF) >= GENDER_THRESHOLDS[gender_kind]:
        return Gender.MALE
    return Gender.FEMALE


def _check_byte(pokerus):
    if not 0 <= pokerus <= 0xFF:
        raise ValueError(f"Pokérus byte must be in [0, 255], got {pokerus}")


def pokerus_status(pokerus):
    """Whether the Pokérus byte means infected, cured or never infected."""
    _check_byte(pokerus)
    if not pokerus:
        return Pokerus.NONE
    if pokerus & 0xF:
        return Pokerus.HAS
    return Pokerus.HAD


def _max_days(pokerus):
    return ((pokerus >> 4) & 3) + 1


def sanitize_pokerus(pokerus):
    """Clamp the days left of an infection to what its strain allows."""
    _check_byte(pokerus)
    if not pokerus:
        return pokerus
    if (pokerus & 0xF) > _max_days(pokerus):
        pokerus = (pokerus & 0xF0) | _max_days(pokerus)
    return pokerus


def update_pokerus(pokerus, days_increase):
    """Pokérus byte after ``days_increase`` days pass.

    An infection that runs out leaves the Pokémon cured, never uninfected.
    """
    _check_byte(pokerus)
    if days_increase < 0:
        raise ValueError(f"days must not be negative, got {days_increase}")
    if not pokerus & 0xF:
        return pokerus
    if (pokerus & 0xF) < days_increase or days_increase > 4:
        pokerus &= 0xF0
    else:
        pokerus -= days_increase
    return pokerus or 0x10


def would_update_end_pokerus(pokerus, days_increase):
    """Whether letting ``days_increase`` days pass would end an active infection."""
    _check_byte(pokerus)
    days = pokerus & 0xF
    return bool(days) and (days <= days_increase or days_increase > 4)


def legal_evs(evs):
    """EVs, in stored order, capped so that their total stays within the limit."""
    evs = tuple(evs)
    if len(evs) != STATS_TOTAL:
        raise ValueError(f"expected {STATS_TOTAL} EVs, got {len(evs)}")
    capped = []
    total = 0
    for ev in evs:
        if not 0 <= ev <= MAX_EV:
            raise ValueError(f"EV must be in [0, {MAX_EV}], got {ev}")
        ev = min(ev, MAX_EVS - total)
        capped.append(ev)
        total += ev
    return tuple(capped)


def ev_of(evs, stat_index):
    """Legal EV of one stat, in display order, from the EVs in stored order."""
    return legal_evs(evs)[_stat_position(stat_index)]


def met_level(origins_info):
    """Level at which the Pokémon was met, 0 for a hatched one."""
    return min(origins_info & 0x7F, MAX_MET_LEVEL)


def trainer_gender(origins_info):
    """Gender of the original trainer."""
    return Gender.FEMALE if (origins_info & 0xFFFF) >> 15 else Gender.MALE