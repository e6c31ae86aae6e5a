"""Encryption and shuffling of the 48-byte data section of a stored Pokémon.

The section holds four 12-byte blocks: growth, attacks, EVs and misc. Their
order depends on the PID. The section is XORed, as 32-bit little-endian
words, with ``pid ^ ot_id``. A 16-bit checksum over the plain data guards it.
"""

import struct
from dataclasses import dataclass, fields
from itertools import permutations

MASK32 = 0xFFFFFFFF
BLOCK_SIZE = 12
NUM_BLOCKS = 4
ENC_DATA_SIZE = BLOCK_SIZE * NUM_BLOCKS
PID_POSITIONS = 24

_WORDS = struct.Struct(f"<{ENC_DATA_SIZE // 4}I")
_HALF_WORDS = f"<{ENC_DATA_SIZE // 2}H"


class ChecksumError(ValueError):
    """The decrypted data does not match its stored checksum."""

    def __init__(self, expected, actual):
        super().__init__(f"checksum mismatch: stored 0x{expected:04X}, computed 0x{actual:04X}")
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class DecryptedBlocks:
    """The four plain data blocks of a stored Pokémon, 12 bytes each."""

    growth: bytes
    attacks: bytes
    evs: bytes
    misc: bytes

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if len(value) != BLOCK_SIZE:
                raise ValueError(f"{field.name} block must be {BLOCK_SIZE} bytes, got {len(value)}")
            object.__setattr__(self, field.name, bytes(value))

    def as_tuple(self):
        """The blocks in growth, attacks, EVs, misc order."""
        return self.growth, self.attacks, self.evs, self.misc


def _build_orders():
    # Each permutation lists which block sits at each position; we store the
    # reverse: the position of growth, attacks, EVs and misc.
    return tuple(
        tuple(order.index(block) for block in range(NUM_BLOCKS))
        for order in permutations(range(NUM_BLOCKS))
    )


_BLOCK_ORDERS = _build_orders()


def block_orders():
    """Positions of the growth, attacks, EVs and misc blocks for each of the 24 keys."""
    return _BLOCK_ORDERS


def index_key(pid):
    """Which of the 24 block orders a PID selects."""
    return (pid & MASK32) % PID_POSITIONS


def compute_checksum(data):
    """Sum of the data's 16-bit little-endian words, modulo 0x10000."""
    data = bytes(data)
    if len(data) % 2:
        raise ValueError("checksum data must have an even length")
    return sum(struct.unpack(f"<{len(data) // 2}H", data)) & 0xFFFF


def _xor_words(data, key):
    return _WORDS.pack(*(word ^ key for word in _WORDS.unpack(data)))


def _check_size(enc_data):
    if len(enc_data) != ENC_DATA_SIZE:
        raise ValueError(f"data section must be {ENC_DATA_SIZE} bytes, got {len(enc_data)}")


def decrypt_blocks(pid, ot_id, checksum, enc_data):
    """Decrypt a data section and split it into its blocks.

    Raises ChecksumError when the plain data does not match ``checksum``.
    """
    enc_data = bytes(enc_data)
    _check_size(enc_data)
    key = (pid ^ ot_id) & MASK32
    plain = _xor_words(enc_data, key)
    actual = sum(struct.unpack(_HALF_WORDS, plain)) & 0xFFFF
    expected = checksum & 0xFFFF
    if actual != expected:
        raise ChecksumError(expected, actual)
    positions = _BLOCK_ORDERS[index_key(pid)]
    return DecryptedBlocks(
        *(plain[pos * BLOCK_SIZE:(pos + 1) * BLOCK_SIZE] for pos in positions)
    )


def encrypt_blocks(pid, ot_id, blocks):
    """Place the blocks in the order the PID selects and encrypt them.

    Returns ``(checksum, enc_data)``.
    """
    positions = _BLOCK_ORDERS[index_key(pid)]
    plain = bytearray(ENC_DATA_SIZE)
    for pos, block in zip(positions, blocks.as_tuple()):
        plain[pos * BLOCK_SIZE:(pos + 1) * BLOCK_SIZE] = block
    checksum = compute_checksum(plain)
    key = (pid ^ ot_id) & MASK32
    return checksum, _xor_words(bytes(plain), key)