# SPDX-License-Identifier: MIT

from timekeep_merge.cleanup import register_cleanup
from timekeep_merge.initialize import initialize
from timekeep_merge.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
