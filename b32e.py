# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import argparse
import binascii
import logging
import sys

import base32e
import mutil

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CODEC_ERROR = 2
EXIT_FAILURE = 3

def build_parser():
    parser = argparse.ArgumentParser(prog="b32e",\
        description="Convert bytes to email names and back.")
    parser.add_argument(\
        "--check",\
        help="Report whether NAME is a valid name; exit status 1 if not.",\
        metavar="NAME")
    parser.add_argument(\
        "--decode",\
        help="Decode NAME and print the bytes as hex.",\
        metavar="NAME")
    parser.add_argument(\
        "--dump",\
        help="Print decoded bytes as a hex dump instead of plain hex.",\
        action="store_true")
    parser.add_argument(\
        "--encode",\
        help="Encode the hex string HEX ('-' reads it from stdin).",\
        metavar="HEX")
    parser.add_argument(\
        "-i",\
        help="Encode the raw contents of file I.")
    parser.add_argument("-l", dest="logconf",\
        help="Specify alternate logging.ini.")

    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    llog.init(args.logconf)

    try:
        return _main(args)
    except base32e.Base32EError as e:
        print("error: {}".format(e), file=sys.stderr)
        return EXIT_CODEC_ERROR
    except Exception:
        llog.handle_exception(log, "_main()")
        return EXIT_FAILURE

def _main(args):
    if args.check is not None:
        valid = base32e.is_valid(args.check)
        print("valid" if valid else "invalid")
        return EXIT_OK if valid else EXIT_INVALID

    if args.decode is not None:
        data = base32e.decode(args.decode)
        log.info("Decoded [{}] to {} bytes.".format(args.decode, len(data)))

        if args.dump:
            print(mutil.hex_dump(data), end='')
        else:
            print(binascii.hexlify(data).decode())
        return EXIT_OK

    if args.i:
        with open(args.i, "rb") as fh:
            data = fh.read()
    else:
        text = args.encode
        if text is None or text == '-':
            text = sys.stdin.read()
        try:
            data = mutil.parse_hex(text)
        except ValueError as e:
            print("error: {}".format(e), file=sys.stderr)
            return EXIT_INVALID

    name = base32e.encode(data)
    log.info("Encoded {} bytes to [{}].".format(len(data), name))
    print(name)

    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
