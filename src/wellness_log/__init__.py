# SPDX-License-Identifier: MIT

from wellness_log.cleanup import register_cleanup
from wellness_log.initialize import initialize
from wellness_log.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
