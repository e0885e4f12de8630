"""CLI commands for managing a game's Gecko codes.

Provides subcommands for listing, inspecting, enabling, disabling, adding
and removing codes, and for bootstrapping the user's enabled list.
"""

import argparse
import logging
import re
import sys
from dataclasses import replace
from pathlib import Path

from .codes import GeckoCode, GeckoCodeManager, Patch
from .config import GeckoConfig, config_from_env, config_path_from_env, load_config
from .storage import IniFile, IniFileError

_CODE_LINE = re.compile(r"^\s*(?:0[xX])?([0-9A-Fa-f]{1,8})\s+(?:0[xX])?([0-9A-Fa-f]{1,8})\s*$")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_USER_INI = 2


def _resolve_config(args: argparse.Namespace) -> GeckoConfig:
    """Build the effective config: file, then environment, then flags."""
    config_path = args.config or config_path_from_env()
    config = config_from_env(load_config(config_path))

    if args.global_ini:
        config = replace(config, global_ini=args.global_ini)
    if args.user_ini:
        config = replace(config, user_ini=args.user_ini)
    return config


def _get_manager(config: GeckoConfig) -> GeckoCodeManager:
    """Create a GeckoCodeManager over the configured INI files and load it."""
    global_store = IniFile.load(config.global_ini) if config.global_ini else IniFile()
    local_store = IniFile.load(config.user_ini) if config.user_ini else IniFile()

    manager = GeckoCodeManager(
        global_store,
        local_store,
        codes_section=config.codes_section,
        enabled_section=config.enabled_section,
        bootstrap=config.bootstrap,
    )
    manager.load()
    return manager


def _format_origin(code: GeckoCode) -> str:
    """Format where a code comes from, with color hints."""
    if code.is_local:
        return "\033[32mlocal\033[0m"
    return "\033[34mglobal\033[0m"


def _format_status(code: GeckoCode) -> str:
    if code.active:
        return "\033[32menabled\033[0m"
    return "\033[31mdisabled\033[0m"


def parse_code_line(text: str) -> Patch:
    """Parse an ``ADDRESS VALUE`` argument into a Patch.

    Raises:
        ValueError: If the text is not two hex numbers of up to 8 digits.
    """
    match = _CODE_LINE.match(text)
    if match is None:
        raise ValueError(f"Invalid code line {text!r}, expected 'AAAAAAAA VVVVVVVV'")
    return Patch.from_values(int(match.group(1), 16), int(match.group(2), 16))


def cmd_list(args: argparse.Namespace, config: GeckoConfig) -> int:
    """List codes."""
    manager = _get_manager(config)
    codes = manager.list_codes(active_only=args.active)

    if not codes:
        print("No codes found.")
        return EXIT_OK

    print(f"\n{'Name':<40} {'Origin':<8} Status")
    print("-" * 64)

    for code in codes:
        # Color codes add 9 invisible characters
        print(f"{code.name:<40} {_format_origin(code):<17} {_format_status(code)}")

    print(f"\nTotal: {len(codes)} code(s)")
    return EXIT_OK


def cmd_info(args: argparse.Namespace, config: GeckoConfig) -> int:
    """Show detailed info about a code."""
    manager = _get_manager(config)

    code = manager.get(args.name)
    if code is None:
        print(f"Error: Code '{args.name}' not found.")
        return EXIT_ERROR

    print(f"\nCode: {code.name}")
    print("-" * 40)
    if code.creator:
        print(f"Creator: {code.creator}")
    print(f"Origin: {_format_origin(code)}")
    print(f"Status: {_format_status(code)}")
    if code.default_active:
        print("Enabled by default: yes")

    if code.codes:
        print("Lines:")
        for patch in code.codes:
            print(f"  {patch.original_text}")

    if code.notes:
        print("Notes:")
        for note in code.notes:
            print(f"  {note}")

    return EXIT_OK


def cmd_enable(args: argparse.Namespace, config: GeckoConfig) -> int:
    """Enable a code."""
    manager = _get_manager(config)

    try:
        changed = manager.enable(args.name)
    except KeyError:
        print(f"Error: Code '{args.name}' not found.")
        return EXIT_ERROR

    if not changed:
        print(f"Code '{args.name}' is already enabled.")
        return EXIT_OK

    manager.save()
    print(f"Enabled code: {args.name}")
    return EXIT_OK


def cmd_disable(args: argparse.Namespace, config: GeckoConfig) -> int:
    """Disable a code."""
    manager = _get_manager(config)

    try:
        changed = manager.disable(args.name)
    except KeyError:
        print(f"Error: Code '{args.name}' not found.")
        return EXIT_ERROR

    if not changed:
        print(f"Code '{args.name}' is already disabled.")
        return EXIT_OK

    manager.save()
    print(f"Disabled code: {args.name}")
    return EXIT_OK


def cmd_add(args: argparse.Namespace, config: GeckoConfig) -> int:
    """Add a user code."""
    name = args.name.strip()

    try:
        patches = [parse_code_line(line) for line in args.code]
    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_ERROR

    code = GeckoCode(
        name=name,
        creator=args.creator or "",
        notes=list(args.note),
        codes=patches,
        is_local=True,
        active=args.enable,
    )

    manager = _get_manager(config)
    try:
        manager.add_code(code)
    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_ERROR

    manager.save()
    print(f"Added code: {name} ({len(patches)} line(s))")
    return EXIT_OK


def cmd_remove(args: argparse.Namespace, config: GeckoConfig) -> int:
    """Remove a user code."""
    manager = _get_manager(config)

    try:
        manager.remove_code(args.name)
    except KeyError:
        print(f"Error: Code '{args.name}' not found.")
        return EXIT_ERROR
    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_ERROR

    manager.save()
    print(f"Removed code: {args.name}")
    return EXIT_OK


def cmd_bootstrap(args: argparse.Namespace, config: GeckoConfig) -> int:
    """Seed the user's enabled list from the global defaults."""
    global_store = IniFile.load(config.global_ini) if config.global_ini else IniFile()
    local_store = IniFile.load(config.user_ini)

    manager = GeckoCodeManager(
        global_store,
        local_store,
        codes_section=config.codes_section,
        enabled_section=config.enabled_section,
        bootstrap=False,
    )
    manager.load()

    if local_store.has_section(config.enabled_section) and not args.force:
        print(f"Error: [{config.enabled_section}] already exists. Use --force to overwrite.")
        return EXIT_ERROR

    lines = manager.bootstrap(force=True)
    local_store.save()

    print(f"Enabled {len(lines)} default code(s).")
    for line in lines:
        print(f"  {line[1:]}")
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="geckocfg",
        description="Manage Gecko cheat codes in game INI files",
    )
    parser.add_argument("--global-ini", type=Path, help="Global (shared) game INI")
    parser.add_argument("--user-ini", type=Path, help="User game INI, receives all edits")
    parser.add_argument("--config", type=Path, help="Config file (default ~/.geckocfg/config.json)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Sub-command help")

    # list command
    list_parser = subparsers.add_parser("list", help="List codes")
    list_parser.add_argument(
        "-a", "--active",
        action="store_true",
        help="Only show enabled codes",
    )

    # info command
    info_parser = subparsers.add_parser("info", help="Show detailed code info")
    info_parser.add_argument("name", help="Name of the code")

    # enable command
    enable_parser = subparsers.add_parser("enable", help="Enable a code")
    enable_parser.add_argument("name", help="Name of the code to enable")

    # disable command
    disable_parser = subparsers.add_parser("disable", help="Disable a code")
    disable_parser.add_argument("name", help="Name of the code to disable")

    # add command
    add_parser = subparsers.add_parser("add", help="Add a user code")
    add_parser.add_argument("name", help="Name of the new code")
    add_parser.add_argument("--creator", help="Who made the code")
    add_parser.add_argument(
        "-c", "--code",
        action="append",
        default=[],
        help="Code line 'AAAAAAAA VVVVVVVV' (repeatable)",
    )
    add_parser.add_argument(
        "-n", "--note",
        action="append",
        default=[],
        help="Note line (repeatable)",
    )
    add_parser.add_argument("--enable", action="store_true", help="Enable the code right away")

    # remove command
    remove_parser = subparsers.add_parser("remove", help="Remove a user code")
    remove_parser.add_argument("name", help="Name of the code to remove")

    # bootstrap command
    bootstrap_parser = subparsers.add_parser(
        "bootstrap", help="Enable the global default codes in the user INI"
    )
    bootstrap_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing enabled list",
    )

    return parser


def run_cli(argv: list[str] | None = None) -> int:
    """Run the CLI with given arguments.

    Args:
        argv: Command-line arguments. Uses sys.argv[1:] if None.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    commands = {
        "list": cmd_list,
        "info": cmd_info,
        "enable": cmd_enable,
        "disable": cmd_disable,
        "add": cmd_add,
        "remove": cmd_remove,
        "bootstrap": cmd_bootstrap,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return EXIT_ERROR

    config = _resolve_config(args)
    if config.user_ini is None:
        print("Error: No user INI configured. Pass --user-ini or set GECKOCFG_USER_INI.")
        return EXIT_NO_USER_INI

    try:
        return handler(args, config)
    except IniFileError as e:
        print(f"Error: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(run_cli())
