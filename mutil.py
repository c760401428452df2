# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from bisect import bisect_left
import binascii
import logging

log = logging.getLogger(__name__)

accept_chars = sorted(b" !\"#$%&`()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_'abcdefghijklmnopqrstuvwxyz{|}~")

width = 16

def _printable(val):
    si = bisect_left(accept_chars, val)
    return si != len(accept_chars) and accept_chars[si] == val

def hex_dump(data, offset=0, length=None):
    assert type(data) in (bytes, bytearray), type(data)

    if length is None:
        length = len(data)

    lines = []

    for start in range(offset, length, width):
        chunk = data[start:min(start + width, length)]

        col1 = ""
        for j, val in enumerate(chunk):
            col1 += format(val, "02x")
            if j % 2 == 1:
                col1 += ' '

        col2 = "".join([chr(c) if _printable(c) else '.' for c in chunk])

        lines.append("{}   {} {}".format(\
            format(start - offset, "#06x"), col1.ljust(width * 5 // 2), col2))

    return "".join([line + '\n' for line in lines])

def parse_hex(text):
    "Parses a hex string into bytes. Whitespace and a leading 0x are ignored."

    s = "".join(text.split())
    if s[:2] in ("0x", "0X"):
        s = s[2:]

    try:
        return binascii.unhexlify(s)
    except (binascii.Error, ValueError) as e:
        raise ValueError("Invalid hex string [{}]: {}".format(text, e)) from e
