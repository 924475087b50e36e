from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Runs the CLI controller and guarantees that an unexpected crash is logged
and reported with a dedicated exit code, distinct from "not includable".
"""

import logging
import os
import sys
import traceback
from typing import Any

# Make 'src' importable when this file is executed directly
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

EXIT_CRASH = 3


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception with its stack trace and exit.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("includable.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("CRITICAL ERROR (INCLUDABLE CLI)", file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(EXIT_CRASH)


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Delegate to the CLI controller under the global supervisor.

    Returns:
        int: Process exit code.
    """
    from includable.interface.cli.app import main as cli_main

    try:
        return cli_main()
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return EXIT_CRASH


if __name__ == "__main__":
    sys.exit(main())
