# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.
#
# The inflate_long/deflate_long names follow paramiko's util module.

import logging

import consts

log = logging.getLogger(__name__)

def inflate_long(s):
    "Turns a big-endian byte string into an unsigned long-int. The first byte"
    " is the most significant; an empty string gives zero."

    out = 0
    for c in s:
        if type(c) is not int or c < 0 or c > consts.BYTE_MASK:
            raise ValueError("Byte value [{}] is out of range.".format(c))
        out = (out << consts.BYTE_BITS) | c
    return out

def deflate_long(n):
    "Turns an unsigned long-int into a big-endian byte string of minimal"
    " length. Zero gives an empty string (NOT b'\\x00'), callers that need a"
    " fixed width must pad it themselves."

    if n < 0:
        raise ValueError("Value [{}] is negative.".format(n))

    s = bytearray()
    while n:
        s.append(n & consts.BYTE_MASK)
        n >>= consts.BYTE_BITS

    s.reverse()
    return bytes(s)
