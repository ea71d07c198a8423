"""Constants shared by the type descriptors and the encoding layer."""

# addr_std$10 anycast:(Maybe Anycast) workchain_id:int8 address:bits256
STD_ADDRESS_BIT_LENGTH = 2 + 1 + 8 + 256

# Returned by bit_len() for anything that is not a fixed-width integer
NOT_AN_INTEGER = 0

ABI_VERSIONS: tuple[int, ...] = (1, 2)
DEFAULT_ABI_VERSION = ABI_VERSIONS[-1]
