import argparse
import logging
import sys

from file_manager.container import DependencyContainer
from file_manager.config.settings import Settings
from file_manager.exceptions import ConfigurationError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="file-manager",
        description="Interactive file manager shell. Type .exit to quit.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--username",
        nargs="?",
        default=None,
        help="Name shown in the welcome and goodbye messages (default: Guest)",
    )
    # Unknown startup arguments are ignored
    args, _ = parser.parse_known_args(argv)

    try:
        settings = Settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    # Logs go to stderr so stdout only carries the shell's own output
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    container = DependencyContainer(settings)
    dispatcher = container.get_dispatcher(username=args.username)
    return dispatcher.run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
