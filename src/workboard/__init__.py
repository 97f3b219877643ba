# SPDX-License-Identifier: MIT

from workboard.cleanup import register_cleanup
from workboard.initialize import initialize
from workboard.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
