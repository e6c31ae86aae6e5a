"""The four move slots of a stored Pokémon, with their PP and PP Up bonuses."""

from dataclasses import dataclass, field
from enum import Enum

MOVES_SIZE = 4
LAST_VALID_GEN_3_MOVE = 354
STRUGGLE_MOVE_ID = 165


class LearnResult(Enum):
    """Outcome of trying to learn a move without asking the player."""

    SKIPPED = "skipped"
    LEARNT = "learnt"
    LEARNABLE = "learnable"


def is_move_valid(move, last_valid_move=LAST_VALID_GEN_3_MOVE):
    """Whether ``move`` is a real move that a Pokémon may know."""
    return bool(move) and move <= last_valid_move and move != STRUGGLE_MOVE_ID


def pp_of_move(base_pp, move, bonus, last_valid_move=LAST_VALID_GEN_3_MOVE):
    """Maximum PP of a move with ``base_pp`` after ``bonus`` PP Ups.

    Only the two low bits of ``bonus`` count. Invalid moves have no PP.
    """
    if not is_move_valid(move, last_valid_move):
        return 0
    return base_pp + (bonus & 3) * (base_pp // 5)


def _check_slot(slot):
    if not 0 <= slot < MOVES_SIZE:
        raise IndexError(f"move slot must be in [0, {MOVES_SIZE}), got {slot}")


@dataclass
class Moveset:
    """Moves, current PP and packed PP Up bonuses of one Pokémon.

    ``base_pp`` maps each valid move to its base PP; it is only read for
    moves that are valid.
    """

    moves: list = field(default_factory=lambda: [0] * MOVES_SIZE)
    pp: list = field(default_factory=lambda: [0] * MOVES_SIZE)
    pp_bonuses: int = 0
    base_pp: dict = field(default_factory=dict)
    last_valid_move: int = LAST_VALID_GEN_3_MOVE

    def __post_init__(self):
        self.moves = list(self.moves)
        self.pp = list(self.pp)
        if len(self.moves) != MOVES_SIZE:
            raise ValueError(f"expected {MOVES_SIZE} moves, got {len(self.moves)}")
        if len(self.pp) != MOVES_SIZE:
            raise ValueError(f"expected {MOVES_SIZE} PP values, got {len(self.pp)}")
        self.pp_bonuses &= 0xFF

    def _valid(self, move):
        return is_move_valid(move, self.last_valid_move)

    def _max_pp(self, move, bonus):
        if not self._valid(move):
            return 0
        return pp_of_move(self.base_pp[move], move, bonus, self.last_valid_move)

    def _clear_bonus(self, slot):
        self.pp_bonuses &= ~(3 << (2 * slot)) & 0xFF

    def _set_bonus(self, slot, bonus):
        self._clear_bonus(slot)
        self.pp_bonuses |= (bonus & 3) << (2 * slot)

    def pp_bonus(self, slot):
        """Number of PP Ups applied to the move in ``slot``."""
        _check_slot(slot)
        return (self.pp_bonuses >> (2 * slot)) & 3

    def teach(self, move, slot):
        """Put ``move`` in ``slot`` with full PP and no PP Ups.

        An invalid move empties the slot.
        """
        _check_slot(slot)
        self._clear_bonus(slot)
        if not self._valid(move):
            move = 0
        self.moves[slot] = move
        self.pp[slot] = self._max_pp(move, 0)

    def swap(self, base_index, other_index):
        """Exchange two slots; an invalid move met on either side becomes empty."""
        _check_slot(base_index)
        _check_slot(other_index)
        other_move = self.moves[other_index]
        other_pp = self.pp[other_index]
        other_bonus = self.pp_bonus(other_index)
        if not self._valid(other_move):
            other_move, other_pp, other_bonus = 0, 0, 0

        self.moves[other_index] = self.moves[base_index]
        self.pp[other_index] = self.pp[base_index]
        self._set_bonus(other_index, self.pp_bonus(base_index))
        if not self._valid(self.moves[other_index]):
            self.moves[other_index] = 0
            self.pp[other_index] = 0
            self._clear_bonus(other_index)

        self.moves[base_index] = other_move
        self.pp[base_index] = other_pp
        self._set_bonus(base_index, other_bonus)

    def make_legal(self):
        """Drop invalid and repeated moves, pack the rest first and refill PP.

        Returns whether at least one valid move is left.
        """
        seen = []
        for slot, move in enumerate(self.moves):
            if self._valid(move) and move not in seen:
                seen.append(move)
            else:
                self.teach(0, slot)
        if not seen:
            return False
        for slot in range(MOVES_SIZE):
            if not self.moves[slot]:
                later = next(
                    (other for other in range(slot + 1, MOVES_SIZE) if self.moves[other]),
                    None,
                )
                if later is not None:
                    self.swap(slot, later)
            self.pp[slot] = self._max_pp(self.moves[slot], self.pp_bonus(slot))
            if self.pp[slot] == 1:
                self._clear_bonus(slot)
        return True

    def learn_if_possible(self, move, is_egg):
        """Learn ``move`` when that needs no choice from the player.

        An empty slot takes the move. A full egg forgets its first move.
        Otherwise the player must pick a move to forget.
        """
        if not self._valid(move) or move in self.moves:
            return LearnResult.SKIPPED
        for slot, known in enumerate(self.moves):
            if not self._valid(known):
                self.teach(move, slot)
                return LearnResult.LEARNT
        if is_egg:
            for slot in range(MOVES_SIZE - 1):
                self.swap(slot, slot + 1)
            self.teach(move, MOVES_SIZE - 1)
            return LearnResult.LEARNT
        return LearnResult.LEARNABLE

    def forget_and_learn(self, move, forget_index):
        """Replace the move in ``forget_index`` with ``move``.

        Returns whether the move was learnt.
        """
        if not 0 <= forget_index < MOVES_SIZE:
            return False
        if not self._valid(move):
            return False
        self.teach(move, forget_index)
        return True