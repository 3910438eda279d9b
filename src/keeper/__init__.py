# SPDX-License-Identifier: MIT

from keeper.initialize import initialize
from keeper.log import configure_logging
from keeper.terminal.app import run


def main() -> None:
    configure_logging()
    initialize()
    run()


if __name__ == "__main__":
    main()
