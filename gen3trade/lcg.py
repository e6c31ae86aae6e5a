"""Pseudo-random number generators of the Gen 3 games and seed recovery from their output."""

MASK32 = 0xFFFFFFFF

GBA3_MULT = 0x41C64E6D
GBA3_ADD = 0x00006073
GBA3_RMULT = 0xEEB9EB65
GBA3_RADD = 0x0A3561A1
COLO_MULT = 0x000343FD
COLO_ADD = 0x00269EC3
COLO_RMULT = 0xB9B33155
COLO_RADD = 0xA170F641

GBA3_MOD = 0x000067D3
GBA3_PAT = 0x00000D3E
GBA3_INC = 0x00004034
GBA3_RMOD = 0x00007ED7
GBA3_RPAT = 0x000071A4
GBA3_RINC = 0x79C8A584

COLO_BASE_0 = 0x43FABC02
COLO_BASE_1 = 3
COLO_MOD_FULL = 0x25B2C
COLO_DIV_FULL = 0x4E64
COLO_MOD_PART = 0x12D96
COLO_DIV_PART = 0x2732

STATIC_IV_MASK = (((0xF << 10) | (0xF << 5)) << (16 + 1)) & MASK32

NUM_SEEDS = 0x10000
NUM_NATURES = 25
TOP_BIT = 0x80000000


def next_seed(seed):
    """Advance the handheld generator by one step."""
    return (seed * GBA3_MULT + GBA3_ADD) & MASK32


def prev_seed(seed):
    """Step the handheld generator back by one step."""
    return (seed * GBA3_RMULT + GBA3_RADD) & MASK32


def next_seed_colo(seed):
    """Advance the console generator by one step."""
    return (seed * COLO_MULT + COLO_ADD) & MASK32


def prev_seed_colo(seed):
    """Step the console generator back by one step."""
    return (seed * COLO_RMULT + COLO_RADD) & MASK32


def nature_of(pid):
    """Nature index determined by a PID."""
    return (pid & MASK32) % NUM_NATURES


def normalize_position(pos, initial_pos, increment, limit):
    """Move a cyclic search position by ``increment`` within ``[0, limit)``.

    When the walk comes back to its starting point both the position and
    the starting point move on by one, so that repeated calls visit every
    position once. Returns the new ``(pos, initial_pos)``.
    """
    if pos + increment < 0:
        pos += limit
    if pos + increment >= limit:
        pos += increment - limit
    else:
        pos += increment
    if pos == initial_pos:
        pos = (pos + 1) % limit
        initial_pos = (initial_pos + 1) % limit
    return pos, initial_pos


def seeds_gba3(first, second):
    """Seeds whose next two handheld outputs are ``first`` and ``second``.

    The returned seeds are the states before the call that produced ``first``.
    """
    first = (first & 0xFFFF) << 16
    second = (second & 0xFFFF) << 16
    diff = ((second - first * GBA3_MULT) & MASK32) >> 16
    low = (((((diff * GBA3_MOD) + GBA3_INC) & MASK32) >> 16) * GBA3_PAT) % GBA3_MOD
    return [
        prev_seed(first | candidate)
        for candidate in range(low, NUM_SEEDS, GBA3_MOD)
        if next_seed(first | candidate) & 0xFFFF0000 == second
    ]


def _reverse_masked_from_low(low, first, second_target):
    found = []
    for candidate in range(low, NUM_SEEDS, GBA3_RMOD):
        seed = first | candidate
        if prev_seed(seed) & STATIC_IV_MASK == second_target:
            seed = next_seed(seed)
            found.append(seed)
            found.append(TOP_BIT ^ seed)
    return found


def reverse_masked_ivs_seeds_gba3(first, second):
    """Seeds found by walking the handheld generator backwards.

    ``first`` is the output one step back; ``second`` is the output two steps
    back, compared only on the IV bits that matter for static encounters.
    Seeds come in pairs that differ only in the top bit.
    """
    first = (first & 0xFFFF) << 16
    second = (second & 0xFFFF) << 16
    second_target = second & STATIC_IV_MASK
    diff = ((second - first * GBA3_RMULT) & MASK32) >> 16
    low0 = (((((diff * GBA3_RMOD) + GBA3_RINC) & MASK32) >> 16) * GBA3_RPAT) % GBA3_RMOD
    low1 = ((((((diff ^ 0x8000) * GBA3_RMOD) + GBA3_RINC) & MASK32) >> 16) * GBA3_RPAT) % GBA3_RMOD
    return _reverse_masked_from_low(low0, first, second_target) + _reverse_masked_from_low(
        low1, first, second_target
    )


def _split_colo(t):
    return (t // COLO_MULT) & 0xFFFF, t % COLO_MULT


def seeds_colo(first, second):
    """Seeds whose next two console outputs are ``first`` and ``second``."""
    first = (first & 0xFFFF) << 16
    second = (second & 0xFFFF) << 16
    t = (second - first * COLO_MULT - (COLO_ADD - 0xFFFF)) & MASK32
    k_max = COLO_BASE_1 - 1 if t > COLO_BASE_0 else COLO_BASE_1
    t_div, t_mod = _split_colo(t)
    found = []
    for _ in range(k_max + 1):
        if t_mod < NUM_SEEDS:
            found.append(prev_seed_colo(first | t_div))
        t_div = (t_div + COLO_DIV_FULL) & 0xFFFF
        t_mod += COLO_MOD_FULL
        if t_mod >= COLO_MULT:
            t_div = (t_div + 1) & 0xFFFF
            t_mod -= COLO_MULT
    return found


def seeds_ivs_colo(first, second):
    """Console seeds matching two IV outputs, ignoring each output's top bit.

    Seeds come in pairs that differ only in the top bit.
    """
    first = (first & 0xFFFF) << 16
    second = (second & 0xFFFF) << 16
    t = (second - first * COLO_MULT - (COLO_ADD - 0xFFFF)) & 0x7FFFFFFF
    k_max = (COLO_BASE_1 << 1) - 1 if t > COLO_BASE_0 else COLO_BASE_1 << 1
    t_div, t_mod = _split_colo(t)
    found = []
    for _ in range(k_max + 1):
        if t_mod < NUM_SEEDS:
            seed = prev_seed_colo(first | t_div)
            found.append(seed)
            found.append(TOP_BIT ^ seed)
        t_div = (t_div + COLO_DIV_PART) & 0xFFFF
        t_mod += COLO_MOD_PART
        if t_mod >= COLO_MULT:
            t_div = (t_div + 1) & 0xFFFF
            t_mod -= COLO_MULT
    return found


def are_colo_valid_tid_sid(tid, sid):
    """Whether a TID/SID pair can come from the console generator."""
    return bool(seeds_colo(tid, sid))


def _ivs_after_pid(seed):
    """IVs generated right after the two PID calls that follow ``seed``."""
    seed = next_seed(next_seed(seed))
    seed = next_seed(seed)
    low_ivs = (seed >> 16) & 0x7FFF
    seed = next_seed(seed)
    return low_ivs | (((seed >> 16) & 0x7FFF) << 15)


def search_specific_low_pid(pid, base_pos, is_swapped=False):
    """Find handheld IVs generated together with ``pid``.

    The low half of the PID is generated first, unless ``is_swapped``.
    Returns ``(pid, ivs)`` or ``None`` when no seed produces the PID.
    """
    pid &= MASK32
    if is_swapped:
        seeds = seeds_gba3(pid >> 16, pid & 0xFFFF)
    else:
        seeds = seeds_gba3(pid & 0xFFFF, pid >> 16)
    if not seeds:
        return None
    return pid, _ivs_after_pid(seeds[base_pos % len(seeds)])


def search_specific_low_pid_colo(pid, base_pos, limited_ivs=None):
    """Find console IVs and ability generated together with ``pid``.

    When ``limited_ivs`` is given, the low byte of the IVs must equal it.
    The enemy trainer's shiny lock must also hold. Returns
    ``(pid, ivs, ability)`` or ``None``.
    """
    pid &= MASK32
    seeds = seeds_colo(pid >> 16, pid & 0xFFFF)
    count = len(seeds)
    if not count:
        return None
    start = base_pos % count
    for offset in range(count):
        seed = seeds[(start + offset) % count]
        ability = (seed >> 16) & 1
        seed = prev_seed_colo(seed)
        high_ivs = ((seed >> 16) & 0x7FFF) << 15
        seed = prev_seed_colo(seed)
        ivs = ((seed >> 16) & 0x7FFF) | high_ivs
        if limited_ivs is not None and (ivs & 0xFF) != limited_ivs:
            continue
        for _ in range(3):
            seed = prev_seed_colo(seed)
        enemy_sid = seed >> 16
        enemy_tid = prev_seed_colo(seed) >> 16
        if (enemy_tid ^ enemy_sid ^ (pid >> 16) ^ (pid & 0xFFFF)) >= 8:
            return pid, ivs, ability
    return None


def roamer_ivs(pid, hp_ivs, atk_ivs):
    """Recover the full IVs of a roamer from its PID and stored IV fragment.

    Roamers keep only the HP IVs and the low three bits of the Attack IVs.
    Returns the IVs or ``None`` when no seed matches.
    """
    pid &= MASK32
    atk_ivs &= 7
    for seed in seeds_gba3(pid & 0xFFFF, pid >> 16):
        ivs = _ivs_after_pid(seed)
        if (ivs & 0x1F) == hp_ivs and ((ivs >> 5) & 7) == atk_ivs:
            return ivs
    return None