"""
Command line entrypoint.

Prints digits of π using a named profile, checks the streaming engine against
the batch reference, or serves the HTTP API through uvicorn.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from . import EngineConfig
from .formatting import format_digits, take
from .profiles import ProfileError, StreamProfile, resolve_profile
from .reference import reference_pi
from .spigot import PiDigits
from .utils.logging import configure_logging

LOG = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def print_digits(
    profile: StreamProfile, count: int, *, raw: bool = False, out: Optional[TextIO] = None
) -> None:
    out = out or sys.stdout
    text = take(PiDigits(), count)
    if not raw:
        text = format_digits(text, profile.group_size, profile.groups_per_line)
    out.write(text)
    out.write("\n")
    out.flush()


def verify(count: int) -> bool:
    """
    Compare the first ``count`` characters of the engine with the batch
    reference, logging the first mismatch.
    """

    streamed = take(PiDigits(), count)
    expected = reference_pi(count)
    if streamed == expected:
        LOG.info("Engine matches reference for %d characters.", count)
        return True
    for index, (got, want) in enumerate(zip(streamed, expected)):
        if got != want:
            LOG.error("Mismatch at position %d: engine %r, reference %r", index, got, want)
            break
    else:
        LOG.error("Length mismatch: engine %d, reference %d", len(streamed), len(expected))
    return False


def serve(config: EngineConfig, host: str = "127.0.0.1", port: int = 8080) -> None:
    import uvicorn

    from .api.server import create_app

    app = create_app(config=config)
    LOG.info("Serving profile '%s' on %s:%d", config.profile, host, port)
    uvicorn.run(app, host=host, port=port, log_config=None, log_level="info")


def _non_negative(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError("must be non-negative")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Stream the decimal digits of pi")
    parser.add_argument("--count", type=_non_negative, default=None, help="characters to emit, '3' and '.' included")
    parser.add_argument("--profile", default="default", help="output profile to use")
    parser.add_argument("--profiles", default=None, help="path to a profiles YAML file")
    parser.add_argument("--raw", action="store_true", help="print digits without grouping")
    parser.add_argument("--verify", action="store_true", help="check the engine against the batch reference")
    parser.add_argument("--serve", action="store_true", help="run the HTTP API instead of printing")
    parser.add_argument("--host", default="127.0.0.1", help="bind host for the API server")
    parser.add_argument("--port", type=int, default=8080, help="bind port for the API server")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="logging level",
    )
    return parser


def run(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    config = EngineConfig(profile=args.profile, profiles_path=args.profiles)
    try:
        profile = resolve_profile(config.profile, config.profiles_path)
    except ProfileError as exc:
        parser.error(str(exc))

    if args.serve:
        try:
            serve(config, host=args.host, port=args.port)
        except KeyboardInterrupt:
            LOG.info("Server interrupted by user.")
        return 0

    count = profile.count if args.count is None else args.count
    if args.verify:
        return 0 if verify(count) else 1

    try:
        print_digits(profile, count, raw=args.raw)
    except KeyboardInterrupt:
        LOG.info("Interrupted by user.")
    return 0


if __name__ == "__main__":
    sys.exit(run())
