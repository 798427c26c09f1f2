# src/css_minify/cli.py
import argparse
import logging
import sys
from dataclasses import replace

from .adapter import MinifyError, minify, quote_literal
from .utils.load_config import ConfigFileNotFound, ConfigParseError, ConfigTypeError, load_config
from .utils.log import debug, enable_all_topics


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="css-minify",
        description="Minify CSS: strip comments and whitespace, shorten colours.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="CSS file path or literal CSS ('-' or nothing reads stdin)",
    )
    parser.add_argument("-o", "--output", help="Write the result here instead of stdout")
    parser.add_argument(
        "--literal",
        action="store_true",
        help="Treat every INPUT as CSS text, never as a path",
    )
    parser.add_argument(
        "--quote",
        action="store_true",
        help="Print the result as a double-quoted, escaped string literal",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any warning was produced",
    )
    parser.add_argument("--config", help="Path to a .css-minify.json settings file")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI: minify one or more CSS files or literals and print the result."""
    args = _parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.debug:
        enable_all_topics()

    try:
        settings = load_config(args.config)
    except (ConfigFileNotFound, ConfigParseError, ConfigTypeError) as e:
        print(f"css-minify: {e}", file=sys.stderr)
        return 1
    if args.strict:
        settings = replace(settings, strict=True)

    inputs = args.inputs or ["-"]
    parts = []
    try:
        for value in inputs:
            if value == "-":
                debug("reading stdin", topic="cli")
                parts.append(minify(sys.stdin.read(), settings=settings, literal=True))
            else:
                parts.append(minify(value, settings=settings, literal=args.literal))
    except MinifyError as e:
        print(f"css-minify: {e}", file=sys.stderr)
        return 1

    result = "".join(parts)
    if args.quote:
        result = quote_literal(result)

    if args.output:
        try:
            with open(args.output, "w", encoding=settings.encoding) as f:
                f.write(result)
        except OSError as e:
            print(f"css-minify: cannot write {args.output}: {e}", file=sys.stderr)
            return 1
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
