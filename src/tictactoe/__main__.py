"""Entry point for running the game via ``python -m tictactoe``."""

from __future__ import annotations

import logging

from .config import GameConfig
from .shell import GameShell
from .ui import ConsolePort

logger = logging.getLogger(__name__)


def main() -> None:
    """Play tic-tac-toe against the computer in this terminal."""

    config = GameConfig.from_env()
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    logger.info("Loaded configuration: %s", config)
    port = ConsolePort(clear_screen=config.clear_screen)
    try:
        GameShell(port=port, config=config).run()
    except (KeyboardInterrupt, EOFError):
        port.write_line("")
        port.write_line("Goodbye!")


if __name__ == "__main__":
    main()
