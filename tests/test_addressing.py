# ==============================================================================
# File: tests/test_addressing.py
# Purpose: Unit tests for splitting world positions into chunk addresses.
# ==============================================================================
import unittest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chunkcodec.addressing import (
    Address,
    block_position,
    chunk_index,
    chunk_position,
    chunk_region_around,
    local_offset,
    max_block,
    min_block,
    split,
    vertical_offset,
)
from chunkcodec.config import ChunkLayout, DEFAULT_LAYOUT, get_preset


class TestAxisSplit(unittest.TestCase):

    def test_chunk_index_is_floor_division(self):
        for exponent in range(9):
            size = 1 << exponent
            for w in range(-300, 300):
                self.assertEqual(chunk_index(w, exponent), w // size, f"w={w} e={exponent}")

    def test_local_offset_stays_in_chunk(self):
        for exponent in range(9):
            size = 1 << exponent
            mask = size - 1
            for w in range(-300, 300):
                offset = local_offset(w, mask)
                self.assertTrue(0 <= offset < size, f"w={w} e={exponent}")
                self.assertEqual(chunk_index(w, exponent) * size + offset, w)

    def test_negative_coordinates(self):
        self.assertEqual(chunk_index(-1, 4), -1)
        self.assertEqual(local_offset(-1, 15), 15)
        self.assertEqual(chunk_index(-33, 5), -2)
        self.assertEqual(local_offset(-33, 31), 31)

    def test_large_coordinates(self):
        w = -(2 ** 40) + 5
        self.assertEqual(chunk_index(w, 5), w // 32)
        self.assertEqual(local_offset(w, 31), 5)

    def test_vertical_offset_is_identity(self):
        for y in (-500, -1, 0, 63, 64, 10_000):
            self.assertEqual(vertical_offset(y), y)

    def test_chunk_bounds(self):
        self.assertEqual(min_block(-2, 5), -64)
        self.assertEqual(max_block(-2, 5), -33)
        self.assertEqual(min_block(3, 4), 48)
        self.assertEqual(max_block(3, 4), 63)
        for w in (min_block(-2, 5), max_block(-2, 5)):
            self.assertEqual(chunk_index(w, 5), -2)


class TestPositionSplit(unittest.TestCase):

    def test_default_layout(self):
        self.assertEqual(chunk_position((-33, 70, 12)), (-2, 1, 0))
        self.assertEqual(block_position((-33, 70, 12)), (31, 70, 12))

    def test_explicit_powers_and_masks(self):
        self.assertEqual(chunk_position((100, -1, -100), (4, 4, 4)), (6, -1, -7))
        self.assertEqual(block_position((100, -1, -100), (15, 15, 15)), (4, -1, 12))

    def test_y_is_never_masked(self):
        self.assertEqual(block_position((0, -70, 0), (31, 63, 31))[1], -70)

    def test_split(self):
        address = split((-33, 70, 12), get_preset("cubic16"))
        self.assertIsInstance(address, Address)
        self.assertEqual(address.chunk, (-3, 4, 0))
        self.assertEqual(address.block, (15, 70, 12))

    def test_split_flat_layout(self):
        address = split((5, 300, -5), get_preset("flat"))
        self.assertEqual(address.chunk, (0, 300, -1))
        self.assertEqual(address.block, (5, 300, 27))

    def test_split_recombines_horizontally(self):
        layout = ChunkLayout(power_x=3, power_y=2, power_z=6)
        for pos in [(-1000, 5, 999), (7, -7, -64), (123456, 0, -654321)]:
            chunk, block = split(pos, layout)
            self.assertEqual(chunk[0] * layout.size_x + block[0], pos[0])
            self.assertEqual(chunk[2] * layout.size_z + block[2], pos[2])


class TestChunkRegion(unittest.TestCase):

    def test_region_around_origin(self):
        min_chunk, max_chunk = chunk_region_around((0, 10, 0), 40, DEFAULT_LAYOUT)
        self.assertEqual(min_chunk, (-2, 0, -2))
        self.assertEqual(max_chunk, (1, 0, 1))

    def test_zero_extent_is_single_chunk(self):
        min_chunk, max_chunk = chunk_region_around((-33, 200, 65), 0)
        self.assertEqual(min_chunk, max_chunk)
        self.assertEqual(min_chunk, chunk_position((-33, 200, 65)))

    def test_negative_extent_raises(self):
        with self.assertRaises(ValueError):
            chunk_region_around((0, 0, 0), -1)


if __name__ == "__main__":
    unittest.main()
