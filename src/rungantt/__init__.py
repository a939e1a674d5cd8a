# SPDX-License-Identifier: MIT

from rungantt.cleanup import register_cleanup
from rungantt.initialize import initialize
from rungantt.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
