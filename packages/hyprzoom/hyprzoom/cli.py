"""hyprzoom - Animate Hyprland's cursor zoom with easing curves.

Run:
    hyprzoom zoom 2.0
    hyprzoom zoom 1.0 --steps 30 --duration 400ms --ease cubic:out
    hyprzoom inout 2.5 --zduration 2s --in-ease expo:out --out-ease sine:io
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Protocol

from zoom_sequence import (
    ParameterSetter,
    SetterError,
    ValueProvider,
    run_phase,
    run_two_phase,
)
from zoom_sequence.types import Sleep

from hyprzoom import __version__
from hyprzoom.config import (
    DEFAULT_DURATION,
    DEFAULT_EASE,
    DEFAULT_HOLD,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUT_EASE,
    DEFAULT_STEPS,
    InOutConfig,
    ZoomConfig,
    parse_duration,
    parse_ease,
    parse_log_level,
    parse_steps,
    parse_zoom,
)
from hyprzoom.hyprland import ZOOM_FACTOR, HyprlandOption
from hyprzoom.logs import setup_logging

log = logging.getLogger(__name__)


class ZoomOption(ParameterSetter, ValueProvider, Protocol):
    """Anything that can both report and receive the zoom factor."""


def run_zoom(
    config: ZoomConfig,
    option: ZoomOption,
    sleep: Sleep | None = None,
) -> list[float]:
    """Ease from the current zoom to ``config.target``. Returns applied values."""
    log.info("executing 'zoom' command")
    log.debug(
        "zoom parameters: steps=%d, duration=%.3fs, target=%s, ease=%s",
        config.steps, config.duration, config.target, config.ease,
    )
    current = option.get_current()
    values = run_phase(config.phase(current), option, sleep=sleep, logger=log)
    log.info("'zoom' command completed successfully")
    return values


def run_inout(
    config: InOutConfig,
    option: ZoomOption,
    sleep: Sleep | None = None,
) -> None:
    """Zoom to ``config.target``, hold, and return to the initial zoom."""
    log.info("executing 'inout' command (zoom in and out)")
    zinit = config.zinit if config.zinit is not None else option.get_current()
    log.debug(
        "inout parameters: steps=%d, duration=%.3fs, init=%s, target=%s, zduration=%.3fs",
        config.steps, config.duration, zinit, config.target, config.zduration,
    )
    run_two_phase(config.animation(zinit), option, sleep=sleep, logger=log)
    log.info("'inout' command completed successfully")


def _cmd_zoom(args: argparse.Namespace, option: ZoomOption) -> None:
    run_zoom(ZoomConfig.from_args(args), option)


def _cmd_inout(args: argparse.Namespace, option: ZoomOption) -> None:
    run_inout(InOutConfig.from_args(args), option)


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-s", "--steps", type=parse_steps, default=DEFAULT_STEPS,
        help="number of steps for the zoom animation (default: %(default)s)",
    )
    p.add_argument(
        "-d", "--duration", type=parse_duration, default=DEFAULT_DURATION,
        help=f"duration of the zoom animation (default: {DEFAULT_DURATION})",
    )
    p.add_argument(
        "ztarget", type=parse_zoom,
        help=f"target zoom ({ZOOM_FACTOR})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hyprzoom",
        description="Animate Hyprland's cursor zoom factor with easing curves",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level", type=parse_log_level, default=DEFAULT_LOG_LEVEL,
        help="log level: off, error, warn, info, debug, trace (default: %(default)s)",
    )
    parser.add_argument(
        "--log-file", type=Path, default=None,
        help="path to the log file (default: $XDG_STATE_HOME/hyprzoom/hyprzoom.log)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    zoom = sub.add_parser("zoom", aliases=["z"], help="zoom to a specific zoom level")
    _add_common(zoom)
    zoom.add_argument(
        "--ease", type=parse_ease, default=DEFAULT_EASE,
        help=f"ease function as family:qualifier (default: {DEFAULT_EASE})",
    )
    zoom.set_defaults(func=_cmd_zoom)

    inout = sub.add_parser("inout", aliases=["in_out", "io"], help="zoom in and out")
    _add_common(inout)
    inout.add_argument(
        "--zinit", type=parse_zoom, default=None,
        help="initial zoom (default: current value of cursor:zoom_factor)",
    )
    inout.add_argument(
        "--in-ease", type=parse_ease, default=DEFAULT_EASE,
        help=f"zoom in ease function (default: {DEFAULT_EASE})",
    )
    inout.add_argument(
        "--out-ease", type=parse_ease, default=DEFAULT_OUT_EASE,
        help=f"zoom out ease function (default: {DEFAULT_OUT_EASE})",
    )
    inout.add_argument(
        "--zduration", type=parse_duration, default=DEFAULT_HOLD,
        help=f"zoomed-in duration (default: {DEFAULT_HOLD})",
    )
    inout.set_defaults(func=_cmd_inout)

    return parser


def main(
    argv: list[str] | None = None,
    option: ZoomOption | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        log_file = setup_logging(args.log_level, args.log_file)
    except OSError as err:
        print(f"failed to initialize logger: {err}", file=sys.stderr)
        return 1
    log.info("log file: %s", log_file)
    log.info("hyprzoom started")

    if option is None:
        option = HyprlandOption(ZOOM_FACTOR)

    handler: Callable[[argparse.Namespace, ZoomOption], None] = args.func
    try:
        handler(args, option)
    except SetterError as err:
        log.error("hyprzoom exited with error: %s", err)
        print(f"hyprzoom: {err}", file=sys.stderr)
        return 1

    log.info("hyprzoom exited successfully")
    return 0
