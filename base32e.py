# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Base32E encoding and decoding.

Converts bytes to a string of symbols that can be used as an email's name
(local-part) and back. The charset drops 0/o and 1/l as they look alike.
"""

import logging

import bigint
import consts

log = logging.getLogger(__name__)

charset = "abcdefghijkmnpqrstuvwxyz23456789"

_charmap = {c: i for i, c in enumerate(charset)}

assert len(charset) == consts.SYMBOL_COUNT

class Base32EError(Exception):
    pass

class InvalidInputError(Base32EError, ValueError):
    """Raised on missing, empty or whitespace only input."""
    pass

class TooLargeError(Base32EError, ValueError):
    """Raised when the name would be (or is) longer than MAX_NAME_SIZE
    symbols.
    """
    pass

class InvalidSymbolError(Base32EError, ValueError):
    def __init__(self, msg, symbol=None, index=None):
        super().__init__(msg)
        self.symbol = symbol
        self.index = index

class InvalidValueError(InvalidSymbolError):
    """Raised when a 5-bit value is outside of [0, 31]."""
    def __init__(self, msg, value=None, index=None):
        super().__init__(msg, index=index)
        self.value = value

def value_to_symbol(value):
    if type(value) is not int or value < 0 or value >= consts.SYMBOL_COUNT:
        raise InvalidValueError(\
            "Value [{}] is out of range. Allowed values are from 0 to {}."\
                .format(value, consts.SYMBOL_MASK),\
            value=value)

    return charset[value]

def symbol_to_value(symbol, index=None):
    value = _charmap.get(symbol)

    if value is None:
        if index is None:
            msg = "Symbol {!r} is not allowed.".format(symbol)
        else:
            msg = "Symbol {!r} at index {} is not allowed."\
                .format(symbol, index)
        raise InvalidSymbolError(msg, symbol=symbol, index=index)

    return value

def group_count(byte_length):
    "Number of 5-bit groups (symbols) needed for byte_length bytes."

    nbits = byte_length * consts.BYTE_BITS
    return (nbits + consts.SYMBOL_BITS - 1) // consts.SYMBOL_BITS

def _check_data(data):
    if data is None:
        raise InvalidInputError("Array can not be None.")

    if type(data) not in (bytes, bytearray):
        # bytes(n) would build n zero bytes.
        if isinstance(data, (str, int)):
            raise InvalidInputError(\
                "Array must be a sequence of bytes, not {}."\
                    .format(type(data).__name__))
        try:
            data = bytes(data)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(\
                "Array is not a sequence of bytes: {}".format(e)) from e

    if not data:
        raise InvalidInputError("Array should contain at least 1 element.")

    return data

def to_groups(data):
    "Divides the bits of data into groups of 5 bits, most significant group"
    " first. The first group is zero extended on the left when the bit count"
    " is not a multiple of 5."

    data = _check_data(data)

    size = group_count(len(data))
    if size > consts.MAX_NAME_SIZE:
        raise TooLargeError(\
            "Initial array is too big to create correct email's name (name"\
            " can not be longer than {} symbols).".format(consts.MAX_NAME_SIZE))

    if log.isEnabledFor(logging.DEBUG):
        log.debug("Splitting {} bytes into {} groups.".format(len(data), size))

    result = [0] * size
    n = bigint.inflate_long(data)

    pos = size - 1
    while n and pos >= 0:
        result[pos] = n & consts.SYMBOL_MASK
        n >>= consts.SYMBOL_BITS
        pos -= 1

    return result

def from_groups(values):
    "Concatenates 5-bit values into one bit sequence and returns it as bytes."
    " The result is floor(5 * len(values) / 8) bytes long, or longer when the"
    " top bits of the first group spill over that length."

    if values is None:
        raise InvalidInputError("Array can not be None.")

    values = list(values)

    if len(values) > consts.MAX_NAME_SIZE:
        raise TooLargeError(\
            "Email's name can not be longer than {} symbols."\
                .format(consts.MAX_NAME_SIZE))

    size = len(values) * consts.SYMBOL_BITS // consts.BYTE_BITS

    n = 0
    for i, value in enumerate(values):
        if type(value) is not int or value < 0 or value >= consts.SYMBOL_COUNT:
            raise InvalidValueError(\
                "Array at index {} has wrong value. Allowed values are from 0"\
                " to {}.".format(i, consts.SYMBOL_MASK),\
                value=value, index=i)
        n = (n << consts.SYMBOL_BITS) | value

    r = bigint.deflate_long(n)

    if len(r) >= size:
        if len(r) > size and log.isEnabledFor(logging.DEBUG):
            log.debug("Decoded {} bytes, exact fit is {}."\
                .format(len(r), size))
        return r

    return bytes(size - len(r)) + r

def encode(data):
    "Encode bytes to a Base32E string of at most MAX_NAME_SIZE symbols."

    return "".join([value_to_symbol(v) for v in to_groups(data)])

def decode(name):
    "Decode a Base32E string, returning bytes."

    if name is None:
        raise InvalidInputError("Email's name can not be None.")

    if not isinstance(name, str):
        raise InvalidInputError(\
            "Email's name must be a str, not {}.".format(type(name).__name__))

    if not name or name.isspace():
        raise InvalidInputError("Email's name can not be empty or whitespace.")

    if len(name) > consts.MAX_NAME_SIZE:
        raise TooLargeError(\
            "Email's name can not be longer than {} symbols."\
                .format(consts.MAX_NAME_SIZE))

    values = [symbol_to_value(c, i) for i, c in enumerate(name)]

    return from_groups(values)

def is_valid(name):
    try:
        decode(name)
    except Base32EError:
        return False

    return True
