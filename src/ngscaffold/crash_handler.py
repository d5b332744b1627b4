"""Process-wide hooks so an unexpected exception ends the run with a short message and exit code 1."""

import os
import sys
import threading

from ngscaffold.diagnostics import environment_facts


def _print_crash(exc_type, exc_value):
    print(f"\nUnexpected error: {exc_type.__name__}: {exc_value}", file=sys.stderr)
    for label, value in environment_facts():
        print(f"  {label}: {value}", file=sys.stderr)


def report_uncaught(exc_type, exc_value, exc_tb):
    if issubclass(exc_type, KeyboardInterrupt):
        print("\nInterrupted.", file=sys.stderr)
        return
    _print_crash(exc_type, exc_value)


def report_thread_exception(args):
    if args.exc_type is SystemExit:
        return
    _print_crash(args.exc_type, args.exc_value)
    # A dead worker thread would otherwise leave the main thread waiting forever.
    os._exit(1)


def install_crash_handlers():
    sys.excepthook = report_uncaught
    threading.excepthook = report_thread_exception
