"""ManagedSubprocess: ties a foreground child's lifetime to this process's signals."""

import os
import signal
import subprocess
import sys

INTERRUPTED_EXIT_CODE = 130

# Signals that end this process; the child is stopped before we go.
TERMINATION_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


class ManagedSubprocess:
    """Context manager that owns a long-running foreground child such as the dev server.

    Ctrl+C terminates the child (escalating to kill after *terminate_timeout*),
    SIGTERM and SIGHUP terminate it the same way and then exit with
    128 + signal number, Ctrl+Z and continue are forwarded to the child's
    process group. The child must be started with start_new_session=True so
    it leads its own group.
    """

    def __init__(self, process: subprocess.Popen, label: str, terminate_timeout: float = 5.0):
        self.process = process
        self.label = label
        self.terminate_timeout = terminate_timeout
        self.interrupted = False
        self._original_handlers = {}

    @property
    def returncode(self) -> int:
        if self.interrupted:
            return INTERRUPTED_EXIT_CODE
        return self.process.returncode

    def _signal_group(self, signum):
        try:
            os.killpg(self.process.pid, signum)
        except ProcessLookupError:
            pass

    def _handle_sigtstp(self, signum, frame):
        self._signal_group(signal.SIGTSTP)
        signal.signal(signal.SIGTSTP, signal.SIG_DFL)
        os.kill(os.getpid(), signal.SIGTSTP)

    def _handle_sigcont(self, signum, frame):
        self._signal_group(signal.SIGCONT)
        signal.signal(signal.SIGTSTP, self._handle_sigtstp)

    def _handle_termination(self, signum, frame):
        self._stop_child(f"Received {signal.Signals(signum).name}")
        raise SystemExit(128 + signum)

    def _install(self, signum, handler):
        self._original_handlers[signum] = signal.getsignal(signum)
        signal.signal(signum, handler)

    def __enter__(self) -> "ManagedSubprocess":
        self._install(signal.SIGTSTP, self._handle_sigtstp)
        self._install(signal.SIGCONT, self._handle_sigcont)
        for signum in TERMINATION_SIGNALS:
            self._install(signum, self._handle_termination)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        try:
            if exc_type is KeyboardInterrupt:
                return self._stop_child("Interrupted")
            return False
        finally:
            for signum, handler in self._original_handlers.items():
                if handler is not None:
                    signal.signal(signum, handler)
            self._original_handlers = {}

    def _stop_child(self, reason) -> bool:
        print(f"\n{reason}. Stopping {self.label}...", file=sys.stderr)
        self.process.terminate()
        try:
            self.process.wait(timeout=self.terminate_timeout)
        except subprocess.TimeoutExpired:
            print(f"{self.label} did not stop, killing it...", file=sys.stderr)
            self.process.kill()
            self.process.wait()
        print("Done.", file=sys.stderr)
        self.interrupted = True
        return True
