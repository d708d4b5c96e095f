# wiegand_converter/cli.py
from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from typing import Sequence

from . import __version__
from .__about__ import APP_TITLE
from .errors import ParityCheckFailed, WiegandError
from .logic import ConversionResult, InputMode, convert

log = logging.getLogger(__name__)

COMMANDS = ("hex", "decimal", "badge")
_GLOBAL_FLAG_RE = re.compile(r"-v+|--verbose")


class ExitCode:
    """Process exit codes returned by :func:`main`."""
    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    USAGE_ERROR = 2         # argparse's own exit status
    INPUT_ERROR = 3
    PARITY_ERROR = 4


# ---------- helpers ----------
def _print_kv(key: str, value: object) -> None:
    print(f"{key}: {value}")

def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

def _emit(result: ConversionResult, args: argparse.Namespace) -> None:
    if args.raw:
        print(result.hex)
        return
    if args.json:
        print(json.dumps(result.as_dict(), sort_keys=True))
        return

    _print_kv("Hex", result.hex)
    _print_kv("Decimal", result.decimal)
    _print_kv("Facility", result.facility)
    _print_kv("Card", result.card)
    _print_kv("Parity", f"{'OK' if result.parity_ok else 'MISMATCH'} (P1={result.p1} P2={result.p2})")
    if result.binary is not None:
        _print_kv("Binary", result.binary)
    _print_kv("Source", result.source.value)

def _handle_error(error: WiegandError, verbose: bool) -> None:
    print(f"Error: {error.message}", file=sys.stderr)
    if verbose and error.context:
        print("Context:", file=sys.stderr)
        for key, value in error.context.items():
            print(f"  {key}: {value}", file=sys.stderr)

def _run(mode: InputMode, value, card, args: argparse.Namespace) -> int:
    result = convert(
        mode, value, card,
        uppercase=args.upper,
        include_binary=args.binary,
        strict=args.strict,
    )
    _emit(result, args)
    return ExitCode.SUCCESS


# ---------- subcommands ----------
def cmd_hex(args: argparse.Namespace) -> int:
    src = args.hex if args.hex is not None else sys.stdin.read()
    return _run(InputMode.HEX, src, None, args)

def cmd_decimal(args: argparse.Namespace) -> int:
    return _run(InputMode.DECIMAL, args.value, None, args)

def cmd_badge(args: argparse.Namespace) -> int:
    return _run(InputMode.FACILITY_CARD, args.facility, args.card, args)


# ---------- parser ----------
def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--upper", action="store_true", help="render hex in uppercase")
    p.add_argument("--binary", action="store_true", help="include the 26-bit binary string")
    p.add_argument(
        "--strict", action="store_true",
        help="fail (exit 4) when the parity bits do not match the payload",
    )
    fmt = p.add_mutually_exclusive_group()
    fmt.add_argument("--raw", action="store_true", help="print only the 8-digit hex word")
    fmt.add_argument("--json", action="store_true", help="print the result as a JSON object")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wiegand-converter",
        description=f"{APP_TITLE} (CLI)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="increase log output (-v info, -vv debug)",
    )

    sp = p.add_subparsers(dest="cmd")

    # hex
    ph = sp.add_parser("hex", help="decode a hex word")
    ph.add_argument("hex", nargs="?", help="1-8 hex digits, e.g. 03409EE9 (stdin if omitted)")
    _add_output_args(ph)
    ph.set_defaults(func=cmd_hex)

    # decimal
    pd = sp.add_parser("decimal", help="decode a decimal word")
    pd.add_argument("value", help="unsigned decimal, 0..67108863")
    _add_output_args(pd)
    pd.set_defaults(func=cmd_decimal)

    # badge
    pb = sp.add_parser("badge", help="encode facility code + card number")
    pb.add_argument("facility", help="facility code 0..255, e.g. 160 or FC160")
    pb.add_argument("card", help="card number 0..65535")
    _add_output_args(pb)
    pb.set_defaults(func=cmd_badge)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Convenience: `wiegand-converter 03409EE9` is treated as the `hex` subcommand.
    # Only the global -v flags stay in front of it; output flags belong to `hex`.
    first = next((i for i, a in enumerate(argv) if not a.startswith("-")), None)
    if first is not None and argv[first] not in COMMANDS:
        leading = argv[:first]
        global_flags = [a for a in leading if _GLOBAL_FLAG_RE.fullmatch(a)]
        local_flags = [a for a in leading if not _GLOBAL_FLAG_RE.fullmatch(a)]
        argv = global_flags + ["hex"] + local_flags + argv[first:]

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if not getattr(args, "cmd", None):
        parser.print_help()
        return ExitCode.SUCCESS

    try:
        return args.func(args)
    except ParityCheckFailed as e:
        _handle_error(e, args.verbose > 0)
        return ExitCode.PARITY_ERROR
    except WiegandError as e:
        _handle_error(e, args.verbose > 0)
        return ExitCode.INPUT_ERROR
    except Exception:
        log.exception("unexpected failure")
        return ExitCode.UNEXPECTED_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
