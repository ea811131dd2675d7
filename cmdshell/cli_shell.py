import logging
import sys
from typing import Optional

from cmdshell.container import DependencyContainer, container
from cmdshell.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main(
    argv: Optional[list[str]] = None, deps: Optional[DependencyContainer] = None
) -> int:
    # Startup arguments are option tokens such as -li or /help, so they are
    # passed through as they are instead of going through argparse.
    args = sys.argv[1:] if argv is None else list(argv)
    deps = deps or container

    try:
        settings = deps.get_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    shell = deps.get_run_shell_use_case()
    return shell.execute(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
