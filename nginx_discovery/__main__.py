"""
Entry point for nginx-discovery.

Usage:
    python -m nginx_discovery /etc/nginx/nginx.conf
    python -m nginx_discovery --tokens site.conf
    python -m nginx_discovery --help
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .ast import Config, Directive
from .const import DEFAULT_CONFIG_PATH, DEFAULT_SNIPPET_CONTEXT
from .errors import ConfigIOError, NginxDiscoveryError
from .logging import get_logger, setup_logging_from_args
from .parser import Lexer, parse, read_source


logger = get_logger("cli")


def format_tree(config: Config) -> list[str]:
    """Render the directive tree, one line per directive or closing brace."""
    lines: list[str] = []

    def add(directive: Directive, level: int, is_last: bool) -> None:
        indent = "  " * level
        prefix = "└─" if is_last else "├─"
        head = " ".join([directive.name, *(a.to_config_string() for a in directive.args)])

        if directive.children is None:
            lines.append(f"{indent}{prefix} {head};")
            return

        lines.append(f"{indent}{prefix} {head} {{")
        for i, child in enumerate(directive.children):
            add(child, level + 1, i == len(directive.children) - 1)
        lines.append(f"{indent}  }}")

    for i, directive in enumerate(config.directives):
        add(directive, 0, i == len(config.directives) - 1)

    return lines


def format_summary(config: Config) -> list[str]:
    """Render directive counts for a parsed configuration."""
    blocks = sum(1 for d in config.walk() if d.is_block)
    return [
        "Configuration summary:",
        f"  Top-level directives: {len(config)}",
        f"  Total directives: {config.count_directives()}",
        f"  Block directives: {blocks}",
    ]


def print_tokens(source: str) -> None:
    for token in Lexer(source):
        print(f"{token.span.line}:{token.span.col}\t{token.kind.name}\t{token.value!r}")


def run(config_path: Path, mode: str, context_lines: int) -> int:
    """Parse a configuration file and print the requested view."""
    try:
        source = read_source(config_path)
    except ConfigIOError as e:
        logger.error(str(e))
        print(e.detailed(), file=sys.stderr)
        return 1

    try:
        if mode == "tokens":
            print_tokens(source)
            return 0

        config = parse(source)
    except NginxDiscoveryError as e:
        logger.debug(f"Parsing {config_path} failed: {e.short()}")
        print(f"{config_path}: {e.with_source(source, context_lines).detailed()}", file=sys.stderr)
        return 1

    if mode in ("tree", "all"):
        print("\n".join(format_tree(config)))
    if mode == "all":
        print()
    if mode in ("summary", "all"):
        print("\n".join(format_summary(config)))

    logger.info(f"Parsed {config_path}: {config.count_directives()} directives")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="nginx-discover",
        description="Parse NGINX configuration and show its directive tree",
    )

    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )

    view = parser.add_mutually_exclusive_group()
    view.add_argument(
        "--tree",
        dest="mode",
        action="store_const",
        const="tree",
        help="Only print the directive tree",
    )
    view.add_argument(
        "--summary",
        dest="mode",
        action="store_const",
        const="summary",
        help="Only print directive counts",
    )
    view.add_argument(
        "--tokens",
        dest="mode",
        action="store_const",
        const="tokens",
        help="Print the raw token stream instead of parsing",
    )

    parser.add_argument(
        "-C", "--context",
        type=int,
        default=DEFAULT_SNIPPET_CONTEXT,
        metavar="N",
        help="Lines of source context to show around errors",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    setup_logging_from_args(
        verbose=args.verbose,
        debug=args.debug,
        quiet=args.quiet,
        log_file=args.log_file,
        colors=not args.no_color,
    )

    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Configuration file not found: {config_path}", file=sys.stderr)
        return 1

    return run(config_path, args.mode or "all", max(args.context, 0))


if __name__ == "__main__":
    sys.exit(main())
