"""Constants for chunk addressing and pairing keys."""

# Default chunk dimensions (32x64x32)
CHUNK_POWER_X = 5
CHUNK_POWER_Y = 6
CHUNK_POWER_Z = 5

# Largest exponent accepted by a chunk layout (chunk side of 2**30 blocks)
MAX_CHUNK_POWER = 30

# Pairing keys live in the non-negative half of a signed 64-bit integer
KEY_BITS = 64
KEY_MAX = (1 << (KEY_BITS - 1)) - 1

# Bit-smear shift steps used by ceil_power_of_two (covers 64-bit values)
SMEAR_SHIFTS = (1, 2, 4, 8, 16, 32)
