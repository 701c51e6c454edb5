"""Splitting world coordinates into chunk and in-chunk block addresses.

Chunk sizes are powers of two, so the chunk index is an arithmetic right
shift and the block offset is a bitmask. Both already floor toward negative
infinity, which ``int(x / size)`` or a truncating modulo would not:

    chunk_index(-33, 5) == -2     # chunk covering -64..-33
    local_offset(-33, 31) == 31   # last block of that chunk

The vertical axis is unbounded inside a chunk column and is never masked.
"""

from typing import NamedTuple, Optional, Tuple

from .config import ChunkLayout, DEFAULT_LAYOUT

Vector3 = Tuple[int, int, int]


class Address(NamedTuple):
    """A world position split into chunk position and block position."""
    chunk: Vector3
    block: Vector3


def chunk_index(world_coordinate: int, chunk_exponent: int) -> int:
    """Calculate chunk coordinate from a world coordinate (floor division)."""
    return world_coordinate >> chunk_exponent


def local_offset(world_coordinate: int, mask: int) -> int:
    """Calculate the block coordinate within its chunk.

    Args:
        world_coordinate: World coordinate, may be negative
        mask: ``(1 << chunk_exponent) - 1``

    Returns:
        Offset in ``[0, mask]``
    """
    return world_coordinate & mask


def vertical_offset(world_y: int) -> int:
    """Block y within a chunk column. The vertical axis is not chunked."""
    return world_y


def min_block(chunk: int, chunk_exponent: int) -> int:
    """Get minimum world coordinate covered by a chunk index."""
    return chunk << chunk_exponent


def max_block(chunk: int, chunk_exponent: int) -> int:
    """Get maximum world coordinate covered by a chunk index."""
    return ((chunk + 1) << chunk_exponent) - 1


def chunk_position(world_pos: Vector3, chunk_powers: Optional[Vector3] = None) -> Vector3:
    """Get the chunk position containing a world position.

    Args:
        world_pos: (x, y, z) world coordinates
        chunk_powers: Per-axis chunk exponents, defaults to the default layout

    Returns:
        (chunk_x, chunk_y, chunk_z)
    """
    if chunk_powers is None:
        chunk_powers = DEFAULT_LAYOUT.powers
    x, y, z = world_pos
    power_x, power_y, power_z = chunk_powers
    return (
        chunk_index(x, power_x),
        chunk_index(y, power_y),
        chunk_index(z, power_z),
    )


def block_position(world_pos: Vector3, chunk_masks: Optional[Vector3] = None) -> Vector3:
    """Get the position of a block inside its chunk.

    Only the x and z masks are applied; y passes through unchanged.

    Args:
        world_pos: (x, y, z) world coordinates
        chunk_masks: Per-axis masks, defaults to the default layout

    Returns:
        (block_x, block_y, block_z)
    """
    if chunk_masks is None:
        chunk_masks = DEFAULT_LAYOUT.masks
    x, y, z = world_pos
    mask_x, _, mask_z = chunk_masks
    return (
        local_offset(x, mask_x),
        vertical_offset(y),
        local_offset(z, mask_z),
    )


def split(world_pos: Vector3, layout: ChunkLayout = DEFAULT_LAYOUT) -> Address:
    """Split a world position into its chunk and block positions."""
    return Address(
        chunk=chunk_position(world_pos, layout.powers),
        block=block_position(world_pos, layout.masks),
    )


def chunk_region_around(
    world_pos: Vector3,
    extent: int,
    layout: ChunkLayout = DEFAULT_LAYOUT,
) -> Tuple[Vector3, Vector3]:
    """Get the chunks within a horizontal distance of a world position.

    The region spans ``extent`` blocks on x and z and keeps the y of
    ``world_pos``. Both corners are inclusive.

    Args:
        world_pos: Centre position in world coordinates
        extent: Horizontal distance in blocks, must be >= 0
        layout: Chunk layout used to split the corners

    Returns:
        (min_chunk, max_chunk) chunk positions
    """
    if extent < 0:
        raise ValueError(f"extent must be >= 0: {extent}")
    x, y, z = world_pos
    min_chunk = chunk_position((x - extent, y, z - extent), layout.powers)
    max_chunk = chunk_position((x + extent, y, z + extent), layout.powers)
    return min_chunk, max_chunk
