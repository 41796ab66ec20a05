#!/usr/bin/env python3
"""
K90 CLI - Command-line interface for K90 macro tools

This CLI compiles MacroScript files into G-key profiles and disassembles
the macro payload of existing profiles.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from .config.gkey_profile import ProfileError, read_macro_info, write_profile
from .macroscript.macroscript_compiler import CompiledMacro, Compiler
from .macroscript.macroscript_disassembler import disassemble

PROFILE_SUFFIX = ".xml"


# Helper functions
def configure_logging(args: Any) -> None:
    """Send compiler diagnostics to stderr at the requested level"""
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(format="%(levelname)s: %(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(level)


def compile_file(input_path: Path) -> CompiledMacro:
    """Compile a MacroScript file"""
    with open(input_path, "r", encoding="utf-8") as f:
        return Compiler().compile(f)


def load_payload(input_path: Path) -> str:
    """Load a MacroInfo payload from a .xml profile or a raw hex text file"""
    if input_path.suffix.lower() == PROFILE_SUFFIX:
        return read_macro_info(input_path)
    with open(input_path, "r", encoding="utf-8") as f:
        return f.read()


def compile_command(args: Any) -> int:
    """Handle the compile command"""
    status = 0

    for input_path in args.inputs:
        output_path = input_path.with_suffix(PROFILE_SUFFIX)
        if str(output_path).lower() == str(input_path).lower():
            print(
                f"skipping argument {input_path}, already has {PROFILE_SUFFIX} extension",
                file=sys.stderr,
            )
            continue

        try:
            macro = compile_file(input_path)
            if args.stdout:
                write_profile(macro, sys.stdout.buffer)
                sys.stdout.buffer.write(b"\n")
                sys.stdout.flush()
            else:
                write_profile(macro, output_path)
                print(
                    f"Compiled {input_path} to {output_path} "
                    f"({len(macro.events)} events, macro '{macro.name}')"
                )
        except (OSError, ValueError) as e:
            print(f"error in {input_path}: {e}", file=sys.stderr)
            status = 1

    return status


def disassemble_command(args: Any) -> int:
    """Handle the disassemble command"""
    try:
        payload = load_payload(args.input)
        for line in disassemble(payload):
            print(line)
        return 0

    except (OSError, ValueError, ProfileError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="K90 macro tools - compile MacroScript files into G-key profiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s compile macro.txt                 # Write macro.xml beside macro.txt
  %(prog)s compile *.txt                     # Compile several scripts
  %(prog)s compile macro.txt --stdout        # Print the profile instead
  %(prog)s disassemble macro.xml             # List the opcodes of a profile
        """,
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only report errors"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Compile command
    compile_parser = subparsers.add_parser(
        "compile", help="Compile MacroScript files to G-key profiles"
    )
    compile_parser.add_argument(
        "inputs", type=Path, nargs="+", help="Input MacroScript files"
    )
    compile_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write profiles to stdout instead of .xml files",
    )

    # Disassemble command
    disassemble_parser = subparsers.add_parser(
        "disassemble", help="Disassemble the macro payload of a profile"
    )
    disassemble_parser.add_argument(
        "input", type=Path, help="Input .xml profile or hex payload file"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args)

    # Route to appropriate command handler
    if args.command == "compile":
        return compile_command(args)
    elif args.command == "disassemble":
        return disassemble_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
