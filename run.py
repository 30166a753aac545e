"""delve CLI entry point.

Generates a room-graph dungeon from one of the bundled catalogs and prints
each placed room with its door labels and neighbours. Accepts configuration
via flags and environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from delve import __version__

_color_init()
_COLOR_ENABLED = True

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    if not sys.stdout.isatty():  # pragma: no cover - environment dependent
        _COLOR_ENABLED = False
except (AttributeError, ValueError):  # pragma: no cover
    _COLOR_ENABLED = False


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    delve dungeon generator

    Grow a traversable graph of rooms from a single entrance and print it.
    Configuration can be provided via CLI flags or environment variables.
    If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          DUNGEON_SEED                        Seed used when --seed is not given
          DUNGEON_ENABLE_GENERATION_METRICS   Collect generation metrics (default: 1)
          DELVE_LOG_LEVEL                     debug, info, warn or error (default: info)
          DELVE_LOG_JSON                      Emit log lines as JSON when truthy

        Examples:
          # Generate a dungeon from the sample catalog with a random seed
          python run.py

          # Reproduce a specific dungeon
          python run.py generate --seed 1234

          # Same, with the subcommand left implicit
          python run.py --seed 1234 --metrics

          # Use the catalog holding exactly one quota of rooms
          python run.py generate --catalog minimal

          # Load variables from .env then generate
          python run.py --env-file .env generate
        """
    )

    parser = argparse.ArgumentParser(
        prog="delve",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"delve dungeon generator {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a dungeon and print its rooms",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a dungeon and print one line per placed room",
    )
    gen_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Generation seed (default: env DUNGEON_SEED or random)",
    )
    gen_parser.add_argument(
        "--catalog",
        default="sample",
        help="Bundled room catalog to draw from: sample or minimal (default: sample)",
    )
    gen_parser.add_argument(
        "--metrics",
        action="store_true",
        help="Print generation metrics after the room list",
    )
    gen_parser.set_defaults(command="generate")

    # If no subcommand provided, default to generate (inserted after the top-level options)
    if "generate" not in argv:
        argv = _with_default_command(list(argv), "generate")

    args = parser.parse_args(argv)
    return args


def _with_default_command(argv: list[str], command: str) -> list[str]:
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--env-file":
            i += 2
        elif arg.startswith("--env-file=") or arg in ("--version", "-h", "--help"):
            i += 1
        else:
            break
    return argv[:i] + [command] + argv[i:]


def _paint(color: str, text) -> str:
    return f"{color}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else str(text)


def format_room(index: int, room) -> str:
    """One line per room: index, name, exit count, then each absolute door."""
    doors = []
    for direction, slot in room.doors.items():
        label = slot.label.value if slot.label is not None else "-"
        entry = f"{direction.value}:{label}"
        if slot.occupant is not None:
            entry += "->" + _paint(Fore.GREEN, type(slot.occupant).__name__)
        doors.append(entry)
    name = _paint(Fore.CYAN, f"{type(room).__name__:<12}")
    return f"  {index:>2} {name} [{room.DOORS}]  " + "  ".join(doors)


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    # Import generator only after environment is ready
    from delve.dungeon import Dungeon, DungeonError
    from delve.dungeon.sample_rooms import CATALOGS, ENTRANCE_ROOM, EXIT_ROOM

    catalog = CATALOGS.get(args.catalog)
    if catalog is None:
        print(_paint(Fore.RED, f"[ERROR] Unknown catalog '{args.catalog}' (choose from {', '.join(CATALOGS)})"),
              file=sys.stderr)
        return 2

    try:
        dungeon = Dungeon(catalog, ENTRANCE_ROOM, EXIT_ROOM, seed=args.seed)
    except DungeonError as exc:
        print(_paint(Fore.RED, f"[ERROR] {type(exc).__name__}: {exc}"), file=sys.stderr)
        return 1

    divider = _paint(Fore.MAGENTA, "=" * 40)
    lines = [
        divider,
        f"  {_paint(Fore.YELLOW, 'Seed:'):12} {dungeon.seed}",
        f"  {_paint(Fore.YELLOW, 'Catalog:'):12} {args.catalog}",
        f"  {_paint(Fore.YELLOW, 'Rooms:'):12} {len(dungeon)}",
        divider,
    ]
    lines.extend(format_room(i, room) for i, room in enumerate(dungeon))
    if args.metrics and dungeon.metrics:
        lines.append(divider)
        for key, val in dungeon.metrics.items():
            lines.append(f"  {key}={val}")
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
