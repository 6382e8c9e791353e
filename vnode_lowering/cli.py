"""Command-line entry point: lower markup in a file and print the replacements."""

from __future__ import annotations

import argparse
import logging
import sys

from .api import dump_json
from .config import LoweringConfig
from .parser import MARKUP_LANGUAGES
from . import constants


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vnode-lower",
        description="Lower JSX elements to virtual node factory calls",
    )
    parser.add_argument("file", help="Source file containing markup ('-' for stdin)")
    parser.add_argument(
        "--language",
        "-l",
        default=constants.DEFAULT_LANGUAGE,
        choices=MARKUP_LANGUAGES,
        help=f"Source grammar (default: {constants.DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--factory",
        "-f",
        default=f"{constants.FACTORY_NAMESPACE}.{constants.FACTORY_METHOD}",
        help="Factory function as Namespace.method (default: %(default)s)",
    )
    parser.add_argument(
        "--hook-prefix",
        default=constants.HOOK_PREFIX,
        help="Attribute prefix of component lifecycle hooks (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log each lowering step"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.file == "-":
        source = sys.stdin.read()
    else:
        with open(args.file, encoding="utf-8") as f:
            source = f.read()

    config = LoweringConfig.from_factory(args.factory, hook_prefix=args.hook_prefix)
    print(dump_json(source, language=args.language, config=config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
