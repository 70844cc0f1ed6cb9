"""Entry point for kandown CLI."""

import sys


def main():
    from kandown.cli import build_parser
    from kandown.cli._common import configure_logging

    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
