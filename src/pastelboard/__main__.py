"""Entry point for pastelboard CLI."""

import sys

from pastelboard.config import ConfigError, configure_logging, read_config

NOUNS = {"board", "card", "column"}


def _run_tui(args) -> int:
    from functools import partial

    from pastelboard.palette import random_color
    from pastelboard.session import Session
    from pastelboard.storage import FileStorage
    from pastelboard.ui import PastelApp

    try:
        config = read_config(args.config)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    # Log to a file, or not at all, so the screen stays clean.
    if config["log_file"]:
        configure_logging(config["log_level"], config["log_file"])

    new_color = partial(random_color, saturation=config["saturation"], lightness=config["lightness"])
    store = args.store_flag or args.store or config["store"]
    session = Session.open(FileStorage(store), args.key or config["key"], new_color)
    PastelApp(session).run()
    return 0


def main():
    argv = sys.argv[1:]
    # No noun = TUI mode, with its own flags
    if not NOUNS.intersection(argv) and not {"-h", "--help"}.intersection(argv):
        from pastelboard.cli import build_tui_parser

        sys.exit(_run_tui(build_tui_parser().parse_args(argv)))

    from pastelboard.cli import build_parser

    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    try:
        config = read_config(args.config)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging(config["log_level"], config["log_file"])

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
