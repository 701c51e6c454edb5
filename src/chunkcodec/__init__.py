"""chunkcodec: chunk addressing and pairing keys for voxel worlds."""

__version__ = "0.1.0"

from .constants import (
    CHUNK_POWER_X,
    CHUNK_POWER_Y,
    CHUNK_POWER_Z,
    MAX_CHUNK_POWER,
    KEY_BITS,
    KEY_MAX,
)
from .powers import (
    ceil_power_of_two,
    is_power_of_two,
    size_of_power,
    chunk_mask,
    exponent_for_size,
)
from .config import ChunkLayout, DEFAULT_LAYOUT, PRESET_LAYOUTS, get_preset, list_presets
from .addressing import (
    Address,
    chunk_index,
    local_offset,
    vertical_offset,
    min_block,
    max_block,
    chunk_position,
    block_position,
    split,
    chunk_region_around,
)
from .pairing import (
    KeyRangeError,
    map_to_non_negative,
    unmap_from_non_negative,
    pair,
    pair_checked,
    unpair,
    unpair_first,
    unpair_second,
    encode,
    decode,
)
from .keys import column_key, column_from_key, world_column_key
from .batch import (
    chunk_indices,
    local_offsets,
    chunk_positions,
    block_positions,
    map_to_non_negative_array,
    unmap_from_non_negative_array,
    encode_many,
    decode_many,
)

__all__ = [
    "__version__",
    # Constants
    "CHUNK_POWER_X",
    "CHUNK_POWER_Y",
    "CHUNK_POWER_Z",
    "MAX_CHUNK_POWER",
    "KEY_BITS",
    "KEY_MAX",
    # Powers of two
    "ceil_power_of_two",
    "is_power_of_two",
    "size_of_power",
    "chunk_mask",
    "exponent_for_size",
    # Layout
    "ChunkLayout",
    "DEFAULT_LAYOUT",
    "PRESET_LAYOUTS",
    "get_preset",
    "list_presets",
    # Addressing
    "Address",
    "chunk_index",
    "local_offset",
    "vertical_offset",
    "min_block",
    "max_block",
    "chunk_position",
    "block_position",
    "split",
    "chunk_region_around",
    # Pairing
    "KeyRangeError",
    "map_to_non_negative",
    "unmap_from_non_negative",
    "pair",
    "pair_checked",
    "unpair",
    "unpair_first",
    "unpair_second",
    "encode",
    "decode",
    # Column keys
    "column_key",
    "column_from_key",
    "world_column_key",
    # Batch
    "chunk_indices",
    "local_offsets",
    "chunk_positions",
    "block_positions",
    "map_to_non_negative_array",
    "unmap_from_non_negative_array",
    "encode_many",
    "decode_many",
]
