import pytest
from hypothesis import given
from hypothesis import strategies as st

from gen3trade.mon_data import (
    ChecksumError,
    DecryptedBlocks,
    block_orders,
    compute_checksum,
    decrypt_blocks,
    encrypt_blocks,
    index_key,
)

u32 = st.integers(min_value=0, max_value=0xFFFFFFFF)
block = st.binary(min_size=12, max_size=12)
blocks_strategy = st.builds(DecryptedBlocks, block, block, block, block)


def _sample_blocks():
    return DecryptedBlocks(
        bytes(range(0, 12)),
        bytes(range(12, 24)),
        bytes(range(24, 36)),
        bytes(range(36, 48)),
    )


def test_block_orders_are_all_permutations():
    orders = block_orders()
    assert len(orders) == 24
    assert len(set(orders)) == 24
    assert all(sorted(order) == [0, 1, 2, 3] for order in orders)


def test_block_orders_first_and_last():
    orders = block_orders()
    assert orders[0] == (0, 1, 2, 3)
    assert orders[23] == (3, 2, 1, 0)


def test_index_key_small_values():
    assert index_key(0) == 0
    assert index_key(5) == 5
    assert index_key(24) == 0


@given(st.integers(min_value=0, max_value=0xFFFFFFFF - 24))
def test_index_key_period(pid):
    assert index_key(pid + 24) == index_key(pid)
    assert 0 <= index_key(pid) < 24


def test_compute_checksum_little_endian():
    assert compute_checksum(b"\x01\x00\x02\x00") == 3
    assert compute_checksum(b"\x00\x01") == 0x100


def test_compute_checksum_wraps():
    assert compute_checksum(b"\xff\xff\x01\x00") == 0


def test_compute_checksum_odd_length():
    with pytest.raises(ValueError):
        compute_checksum(b"\x01\x02\x03")


def test_zero_key_identity_order():
    blocks = _sample_blocks()
    checksum, enc = encrypt_blocks(0, 0, blocks)
    assert enc == bytes(range(48))
    assert checksum == compute_checksum(bytes(range(48)))


def test_zero_key_reversed_order():
    blocks = _sample_blocks()
    _, enc = encrypt_blocks(23, 23, blocks)
    assert enc[:12] == blocks.misc
    assert enc[36:] == blocks.growth


def test_decrypt_all_zero():
    result = decrypt_blocks(0x12345678, 0x12345678, 0, bytes(48))
    assert result.as_tuple() == (bytes(12),) * 4


@given(u32, u32, blocks_strategy)
def test_round_trip(pid, ot_id, blocks):
    checksum, enc = encrypt_blocks(pid, ot_id, blocks)
    assert len(enc) == 48
    assert decrypt_blocks(pid, ot_id, checksum, enc) == blocks


@given(u32, u32, blocks_strategy)
def test_checksum_is_over_plain_data(pid, ot_id, blocks):
    checksum, _ = encrypt_blocks(pid, ot_id, blocks)
    assert checksum == compute_checksum(b"".join(blocks.as_tuple()))


def test_bad_checksum_raises():
    blocks = _sample_blocks()
    checksum, enc = encrypt_blocks(0xDEADBEEF, 0x01020304, blocks)
    with pytest.raises(ChecksumError) as info:
        decrypt_blocks(0xDEADBEEF, 0x01020304, (checksum + 1) & 0xFFFF, enc)
    assert info.value.expected == (checksum + 1) & 0xFFFF
    assert info.value.actual == checksum


def test_wrong_length_section():
    with pytest.raises(ValueError):
        decrypt_blocks(0, 0, 0, bytes(47))


def test_block_size_enforced():
    with pytest.raises(ValueError):
        DecryptedBlocks(bytes(11), bytes(12), bytes(12), bytes(12))