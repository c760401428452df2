# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

# Longest allowed email local-part, in symbols.
MAX_NAME_SIZE = 64

BYTE_BITS = 8
BYTE_MASK = 0xff

SYMBOL_BITS = 5 # bits per symbol.
SYMBOL_MASK = (1 << SYMBOL_BITS) - 1
SYMBOL_COUNT = 1 << SYMBOL_BITS

MAX_DATA_SIZE = MAX_NAME_SIZE * SYMBOL_BITS // BYTE_BITS
