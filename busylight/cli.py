"""
Command line interface for the Busylight client.

    busylight status
    busylight on red
    busylight alert orange --sound 6 --volume 50
    busylight flash red blue
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .colors import list_colors
from .config import settings
from .integration import Busylight
from .integration.base import TRANSPORT_ERRORS
from .models import DEFAULT_SOUND, DEFAULT_VOLUME, StatusResult

logger = logging.getLogger(__name__)

COLOR_COMMANDS = ("on", "blink", "pulse")
SOUND_COMMANDS = ("alert", "jingle")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str, log_file: Optional[str] = None):
    """Configure root logging the same way for every entry point."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="busylight", description="Control a Busylight via its HTTP server.")
    parser.add_argument("--url", default=settings.base_url, help="Busylight server URL (default: %(default)s)")
    parser.add_argument("--timeout", type=float, default=settings.timeout, help="Request timeout in seconds")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level.upper(),
        help="Logging level (default: %(default)s)",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("status", help="Check whether the server is running")
    commands.add_parser("off", help="Turn the light off")
    commands.add_parser("colors", help="List known color names")

    for name in COLOR_COMMANDS:
        sub = commands.add_parser(name, help=f"{name.capitalize()} the light with a color")
        sub.add_argument("color")

    for name in SOUND_COMMANDS:
        sub = commands.add_parser(name, help=f"Light up and play the {name} sound")
        sub.add_argument("color")
        sub.add_argument("--sound", type=int, default=DEFAULT_SOUND, help="Ringtone 0-8 (default: %(default)s)")
        sub.add_argument("--volume", type=int, default=DEFAULT_VOLUME, help="Volume 0-100 (default: %(default)s)")

    flash = commands.add_parser("flash", help="Flash between two colors")
    flash.add_argument("color_a")
    flash.add_argument("color_b")

    return parser


async def run(args: argparse.Namespace) -> int:
    """Execute a parsed command and return the process exit code."""
    client = Busylight(base_url=args.url, timeout=args.timeout)
    try:
        if args.command == "status":
            result = await client.status()
            if isinstance(result, StatusResult):
                print(f"{result.status} {result.status_text}")
                return 1
            print(result)
            return 0

        if args.command == "off":
            response = await client.off()
        elif args.command in COLOR_COMMANDS:
            response = await getattr(client, args.command)(args.color)
        elif args.command in SOUND_COMMANDS:
            response = await getattr(client, args.command)(args.color, sound=args.sound, volume=args.volume)
        else:
            response = await client.flash_colors(args.color_a, args.color_b)

        print(f"{response.status} {response.status_text}")
        return 0 if response.ok else 1
    finally:
        await client.close()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, settings.log_file)

    if args.command == "colors":
        print("\n".join(list_colors()))
        return 0

    try:
        return asyncio.run(run(args))
    except ValidationError as e:
        print(f"busylight: invalid input: {e}", file=sys.stderr)
        return 2
    except TRANSPORT_ERRORS as e:
        logger.error(f"Could not reach Busylight server at {args.url}: {e!r}")
        return 1
