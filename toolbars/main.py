"""
Editor Toolbars - Main

Command-line entry point for the toolbar host.

Usage:
    editor-toolbars [--debug]
"""

import logging
import sys

from .application import ToolbarApplication
from .core.constants import LOG_FORMAT
from .session import ToolbarSession


def parse_arguments(args: list[str]) -> bool:
    """
    Parse command-line arguments.

    Returns:
        True if debug logging was requested
    """
    if not args:
        return False

    if args == ["--debug"]:
        return True

    if args[0] in ("-h", "--help"):
        show_usage()
        sys.exit(0)

    print(f"Error: Unknown arguments: {' '.join(args)}")
    print("")
    show_usage()
    sys.exit(1)


def show_usage():
    """Display usage information."""
    print("Usage: editor-toolbars [--debug]")
    print("")
    print("Options:")
    print("  --debug    Log every option transition")
    print("")
    print("Keys:")
    print("  Space      Toggle the simulated selection (enables Bounds)")


def configure_logging(debug: bool):
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)


def main():
    """Main entry point for the toolbar host."""
    debug = parse_arguments(sys.argv[1:])
    configure_logging(debug)

    with ToolbarSession() as session:
        app = ToolbarApplication(session)
        app.run()


if __name__ == "__main__":
    main()
