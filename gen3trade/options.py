"""Choice lists for the main menu and the trade menu."""

from dataclasses import dataclass

TOTAL_GENS = 3
MAIN_OPTIONS_NUM = TOTAL_GENS
PARTY_SIZE = 6


@dataclass(frozen=True)
class MainOptions:
    """Generations offered by the main menu.

    ``options`` lists the valid generations in ascending order, the last one
    repeated to fill every slot; it is all zeros when none is valid.
    ``valid_mask`` has bit ``gen - 1`` set for each valid generation.
    """

    options: tuple
    valid_mask: int


def build_main_options(valid_gens):
    """Build the main-menu choices from the generations that can be traded."""
    valid = set(valid_gens)
    unknown = valid - set(range(1, TOTAL_GENS + 1))
    if unknown:
        raise ValueError(f"unknown generations: {sorted(unknown)}")
    options = [0] * MAIN_OPTIONS_NUM
    slot = 0
    mask = 0
    for gen in range(1, TOTAL_GENS + 1):
        if gen in valid:
            options[slot:] = [gen] * (MAIN_OPTIONS_NUM - slot)
            slot += 1
            mask |= 1 << (gen - 1)
    return MainOptions(tuple(options), mask)


def count_higher_options(options, current, limit):
    """Count the successively higher values among the first ``limit`` options."""
    count = 0
    highest = current
    for option in options[:limit]:
        if option > highest:
            count += 1
            highest = option
    return count


def count_lower_options(options, current, limit):
    """Count the successively lower values among the first ``limit`` options, read backwards."""
    count = 0
    lowest = current
    for option in reversed(options[:limit]):
        if option < lowest:
            count += 1
            lowest = option
    return count


def trade_options(validity, party_size):
    """Indices of the party members that can be offered in a trade.

    ``validity`` flags each party slot for the target generation; only the
    first ``party_size`` slots, and never more than a full party, count.
    """
    real_size = min(party_size, PARTY_SIZE)
    return tuple(index for index, valid in enumerate(validity[:real_size]) if valid)