from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, TextIO

from kira import __version__
from kira.config import default_config, load
from kira.directive import Directive, parse_directive
from kira.errors import KiraError, OtherError, ParseError, friendly_message
from kira.paths import list_backlight_devices, resolve_backlight_dir
from kira.system.backlight import Backlight
from kira.target import compute_target
from kira.transition import walk

log = logging.getLogger(__name__)

USAGE_NOTES = """\
percent must be a number between 0 and 100.
A prefix of either - or + is allowed.
Without a prefix, the brightness gets set to the given percentage.
With the + prefix, the given percentage gets added to current brightness.
With the - prefix, the given percentage gets subtracted from current brightness.
Without any argument, the brightness gets set to 100%.

You need permission to modify the backlight device in `/sys/class/backlight/`.
"""


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="kira",
        usage="kira [options] [+-][percent]",
        description="Smoothly change the display backlight brightness.",
        epilog=USAGE_NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("--version", action="version", version=__version__)
    # Tokens like "-22" are taken as positionals since no option looks like a number.
    ap.add_argument("percent", nargs="?", help="target percent, optionally prefixed by + or -")
    ap.add_argument("-c", "--config", help="optional YAML config file")
    ap.add_argument("-d", "--device", help="backlight name under /sys/class/backlight or a dir")
    ap.add_argument("-l", "--list", action="store_true", help="list backlight devices and exit")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    ap.set_defaults(extra=[])
    return ap


def _setup_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _directive(percent: str | None, extra: list[str]) -> Directive:
    # argparse leaves tokens like "-5x" unparsed; they still go through parse_directive.
    tokens = ([percent] if percent is not None else []) + list(extra)
    if not tokens:
        return Directive.full()
    if len(tokens) > 1:
        raise ParseError(f"expected a single percent value, got {tokens}")
    return parse_directive(tokens[0])


def run(args: argparse.Namespace) -> None:
    cfg: dict[str, Any] = load(args.config) if args.config else default_config()

    if args.list:
        for name in list_backlight_devices():
            print(name)
        return

    directive = _directive(args.percent, args.extra)

    device = args.device if args.device is not None else cfg["backlight"]["device"]
    backlight = Backlight(resolve_backlight_dir(device))

    maximum = backlight.read_max()
    minimum = int(cfg["backlight"]["min_brightness"])
    current = backlight.read_current()
    target = compute_target(directive, current, maximum, minimum)
    log.info(
        "%s: current=%d max=%d min=%d target=%d",
        backlight.sysfs_dir,
        current,
        maximum,
        minimum,
        target,
    )

    written = walk(
        backlight,
        current,
        target,
        delay=float(cfg["transition"]["step_delay_seconds"]),
    )
    log.info("wrote %d brightness steps", written)


def report(parser: argparse.ArgumentParser, error: KiraError, stream: TextIO) -> None:
    print(friendly_message(error.kind), file=stream)
    diagnostic = repr(error)
    if error.__cause__ is not None:
        diagnostic += f" (caused by {error.__cause__!r})"
    print(diagnostic, file=stream)
    print(file=stream)
    parser.print_help(stream)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args, extra = parser.parse_known_args(argv)
    args.extra = extra
    _setup_logging(args.verbose)

    error: KiraError
    try:
        run(args)
    except KiraError as e:
        error = e
    except Exception as e:
        error = OtherError(str(e))
        error.__cause__ = e
    else:
        return 0

    report(parser, error, sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
