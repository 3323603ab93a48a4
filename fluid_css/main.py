#!/usr/bin/env python3
"""
fluid-css - Main Entry Point

Generate, inspect and rewrite fluid clamp() values from the command line.
"""

import argparse
import json
import sys
from typing import List, Optional

from fluid_css import __version__
from fluid_css.context import Axis, Context
from fluid_css.css.declarations import Stylesheet
from fluid_css.errors import FluidError
from fluid_css.fluid import generate, parse, rewrite
from fluid_css.utils.config import Config
from fluid_css.utils.logging import log_exception, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="fluid-css",
        description="Generate and rewrite fluid CSS clamp() values")
    parser.add_argument("--config", default=None, help="JSON file with screens, containers, defaults and theme")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument("--version", action="version", version=f"fluid-css {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    container_help = "Scale with a container (optionally named) instead of the viewport"

    generate_parser = subparsers.add_parser("generate", help="Generate a fluid value")
    generate_parser.add_argument("start", help="Value at the start breakpoint, e.g. 1rem")
    generate_parser.add_argument("end", help="Value at the end breakpoint, e.g. 2rem")
    generate_parser.add_argument("--start-bp", default=None, help="Start breakpoint")
    generate_parser.add_argument("--end-bp", default=None, help="End breakpoint")
    generate_parser.add_argument("--container", nargs="?", const=True, default=None, help=container_help)
    generate_parser.add_argument("--check-sc144", action="store_true", help="Check WCAG SC 1.4.4")
    generate_parser.add_argument("--check-bp", action="store_true", help="Fail on breakpoint problems")

    parse_parser = subparsers.add_parser("parse", help="Show the parameters of a fluid value")
    parse_parser.add_argument("value", help="A generated fluid value")

    rewrite_parser = subparsers.add_parser("rewrite", help="Rewrite fluid values in a stylesheet")
    rewrite_parser.add_argument("file", help="Stylesheet to rewrite ('-' for stdin)")
    rewrite_parser.add_argument("--end-bp", required=True, help="Named breakpoint, or [value] for a literal")
    rewrite_parser.add_argument("--start-bp", default=None, help="Start breakpoint")
    rewrite_parser.add_argument("--container", nargs="?", const=True, default=None, help=container_help)
    rewrite_parser.add_argument("-o", "--output", default=None, help="Write to this file instead of stdout")

    return parser.parse_args(argv)


def run(args: argparse.Namespace, context: Context) -> str:
    """
    Run a parsed command.

    Args:
        args: Parsed arguments
        context: Context built from the configuration

    Returns:
        str: Command output
    """
    if args.command == "generate":
        return generate(args.start, args.end, context,
                        start_bp=args.start_bp, end_bp=args.end_bp,
                        at_container=Axis.coerce(args.container),
                        check_sc144=args.check_sc144, check_bp=args.check_bp)

    if args.command == "parse":
        parsed = parse(args.value)
        return json.dumps(parsed.as_dict() if parsed else None, indent=2)

    if args.file == "-":
        css_content = sys.stdin.read()
    else:
        with open(args.file, 'r', encoding='utf-8') as f:
            css_content = f.read()

    stylesheet = Stylesheet.parse(css_content)
    rewrite(stylesheet, context, (args.start_bp, args.end_bp), Axis.coerce(args.container))
    return stylesheet.css_text


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for fluid-css."""
    args = parse_args(argv)
    logger = setup_logging(log_file=args.log_file,
                           console_level="DEBUG" if args.debug else "WARNING")
    logger.debug(f"Running {args.command} with fluid-css v{__version__}")

    try:
        context = Context.from_config(Config(args.config))
        output = run(args, context)
    except FluidError as e:
        if args.debug:
            log_exception(logger, e, f"{args.command} failed")
        print(f"fluid-css: {e}", file=sys.stderr)
        return 1

    if getattr(args, "output", None):
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
        logger.info(f"Wrote {args.output}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
