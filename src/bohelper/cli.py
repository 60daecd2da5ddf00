# bohelper/cli.py
from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Iterable, Sequence

from .__about__ import APP_TITLE, __version__, about_text
from .hexstring import (
    DEFAULT_ENDIANNESS,
    NATIVE_WORD_BITS,
    BoHelperError,
    Endianness,
    HexString,
    hex_bytes_to_strs,
)

logger = logging.getLogger(__name__)


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def clean_hex_text(text: str) -> str:
    """Strip the separators people paste along with hex.

    Accepts:
      - "E8 08 B0 04" (spaces)
      - "e8,08,b0,04" (commas)
      - "0xE8 0x08" or "0xE80x08" (0x prefixes)
      - "E808_B004" (underscores)
      - Odd tokens padded when separated ("F A" → "0F0A")
    A single continuous token is left for the core to pad and validate.
    """
    s = text.strip()
    s = s.replace(",", " ").replace("_", " ")
    s = re.sub(r"0x", "", s, flags=re.IGNORECASE)
    tokens = s.split()
    if len(tokens) <= 1:
        return "".join(tokens)
    return "".join("0" + tok if len(tok) % 2 else tok for tok in tokens)

def _read_hex_arg(value: str | None) -> str:
    src = value if value is not None else sys.stdin.read()
    return clean_hex_text(src)


# ---------- subcommands ----------
def cmd_hex(args: argparse.Namespace) -> int:
    hs = HexString.from_hex_str(_read_hex_arg(args.hex), args.source, args.target)
    _print_kv("Hex", hs.as_hex_string(args.target))
    _print_kv("Units", hex_bytes_to_strs(hs.hex_bytes))
    _print_kv("Length", str(len(hs)))
    return 0


def cmd_int(args: argparse.Namespace) -> int:
    hs = HexString.from_hex_str(_read_hex_arg(args.hex), args.endian, Endianness.BIG)
    value = hs.as_int()
    if value is None:
        _print_kv("Int", f"too large for {NATIVE_WORD_BITS}-bit word")
    else:
        _print_kv("Int", str(value))
    return 0


def cmd_text(args: argparse.Namespace) -> int:
    hs = HexString.from_str(args.text, args.source, args.target)
    _print_kv("Hex", hs.as_hex_string(args.target))
    _print_kv("Length", str(len(hs)))
    return 0


def cmd_find(args: argparse.Namespace) -> int:
    haystack = HexString.from_hex_str(
        _read_hex_arg(args.haystack), args.haystack_endian, args.haystack_endian
    )
    if args.text:
        needle = HexString.from_str(args.needle, args.needle_endian, args.needle_endian)
    else:
        needle = HexString.from_hex_str(
            clean_hex_text(args.needle), args.needle_endian, args.needle_endian
        )
    logger.debug("searching %d unit(s) for %d unit(s)", len(haystack), len(needle))

    offsets = haystack.get_offsets(needle)
    _print_kv("Offsets", [str(o) for o in offsets] if offsets else "none")
    _print_kv("Count", str(len(offsets)))
    return 0


def cmd_about(args: argparse.Namespace) -> int:
    print(about_text())
    return 0


# ---------- parser ----------
def _add_conversion_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--from", dest="source", type=Endianness, choices=list(Endianness),
        default=DEFAULT_ENDIANNESS,
        help=f"byte order of the input (default: {DEFAULT_ENDIANNESS})"
    )
    p.add_argument(
        "--to", dest="target", type=Endianness, choices=list(Endianness),
        default=DEFAULT_ENDIANNESS,
        help=f"byte order to convert to (default: {DEFAULT_ENDIANNESS})"
    )

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bohelper",
        description=f"{APP_TITLE}: hex strings, endianness and offsets"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")

    sp = p.add_subparsers(dest="cmd")

    # hex
    ph = sp.add_parser("hex", help="normalize hex text and convert its byte order")
    ph.add_argument("hex", nargs="?", help="hex like '7b90ff00a0' or '7B 90 FF' (stdin if omitted)")
    _add_conversion_args(ph)
    ph.set_defaults(func=cmd_hex)

    # int
    pi = sp.add_parser("int", help="read hex as an unsigned native-word integer")
    pi.add_argument("hex", nargs="?", help="hex bytes (stdin if omitted)")
    pi.add_argument(
        "--endian", type=Endianness, choices=list(Endianness), default=Endianness.BIG,
        help="byte order of the input (default: big)"
    )
    pi.set_defaults(func=cmd_int)

    # text
    pt = sp.add_parser("text", help="encode text by code point as hex")
    pt.add_argument("text", help="text to encode")
    _add_conversion_args(pt)
    pt.set_defaults(func=cmd_text)

    # find
    pf = sp.add_parser("find", help="list the offsets of a needle in a haystack")
    pf.add_argument("needle", help="hex to look for (or text with --text)")
    pf.add_argument("haystack", nargs="?", help="hex to search (stdin if omitted)")
    pf.add_argument(
        "--needle-endian", type=Endianness, choices=list(Endianness),
        default=DEFAULT_ENDIANNESS, help=f"byte order of the needle (default: {DEFAULT_ENDIANNESS})"
    )
    pf.add_argument(
        "--haystack-endian", type=Endianness, choices=list(Endianness),
        default=DEFAULT_ENDIANNESS, help=f"byte order of the haystack (default: {DEFAULT_ENDIANNESS})"
    )
    pf.add_argument("--text", action="store_true", help="treat the needle as literal text")
    pf.set_defaults(func=cmd_find)

    # about
    pa = sp.add_parser("about", help="show version and project information")
    pa.set_defaults(func=cmd_about)

    return p


def run(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen subcommand.

    Raises :class:`BoHelperError` on bad input; reporting is left to ``main``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    return args.func(args)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        return run(argv)
    except BoHelperError as err:
        print(f"Error encountered: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
