# SPDX-License-Identifier: MIT

from taskchart.cleanup import register_cleanup
from taskchart.initialize import initialize
from taskchart.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
