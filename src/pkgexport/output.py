"""
Centralized console output module for pkgexport.

All user-facing progress output goes through this module so that every line
carries the elapsed time since the export started, in MM:SS.cc format
(minutes:seconds.centiseconds).

Example output:
    00:00.01 Exporting package: Foo
    00:00.01 [2/7] Classifying targets...
    00:00.02       libraries: foo, foo_static
    00:00.03 [4/7] Writing FooConfig.cmake...

Usage:
    from pkgexport.output import log, log_phase, log_detail, log_warning, init_timer

    init_timer()
    log("Exporting package: Foo")
    log_phase(2, 7, "Classifying targets...")
    log_detail("libraries: foo")
    log_warning("Skipping target docs: not a library or executable")

Diagnostics that are not meant for the console (debug traces) use the
standard ``logging`` module instead.
"""

import sys
import time
from pathlib import Path
from types import TracebackType
from typing import Optional, TextIO

# Global state for the timer
_start_time: Optional[float] = None
_output_stream: TextIO = sys.stdout
_verbose: bool = True


def init_timer(output_stream: Optional[TextIO] = None) -> None:
    """
    Initialize the export timer.

    If not called explicitly, it is called automatically on first log.

    Args:
        output_stream: Optional output stream (defaults to sys.stdout)
    """
    global _start_time, _output_stream
    _start_time = time.time()
    if output_stream is not None:
        _output_stream = output_stream


def set_output_stream(output_stream: TextIO) -> None:
    """Redirect console output (used by the CLI and tests)."""
    global _output_stream
    _output_stream = output_stream


def set_verbose(verbose: bool) -> None:
    """
    Set verbose mode for logging.

    Args:
        verbose: If True, all messages are printed. If False, only non-verbose messages.
    """
    global _verbose
    _verbose = verbose


def get_elapsed() -> float:
    """
    Get elapsed time since timer initialization.

    Returns:
        Elapsed time in seconds
    """
    global _start_time
    if _start_time is None:
        init_timer()
    return time.time() - _start_time  # type: ignore


def format_timestamp() -> str:
    """
    Format the current elapsed time as MM:SS.cc.

    Returns:
        Formatted timestamp string
    """
    elapsed = get_elapsed()
    minutes = int(elapsed // 60)
    seconds = elapsed % 60
    return f"{minutes:02d}:{seconds:05.2f}"


def _print(message: str) -> None:
    _output_stream.write(f"{format_timestamp()} {message}\n")
    _output_stream.flush()


def log(message: str, verbose_only: bool = False) -> None:
    """
    Log a message with timestamp.

    Args:
        message: Message to log
        verbose_only: If True, only print if verbose mode is enabled
    """
    if verbose_only and not _verbose:
        return
    _print(message)


def log_phase(phase: int, total: int, message: str, verbose_only: bool = False) -> None:
    """
    Log an export phase message.

    Format: [N/M] message

    Args:
        phase: Current phase number
        total: Total number of phases
        message: Phase description
        verbose_only: If True, only print if verbose mode is enabled
    """
    if verbose_only and not _verbose:
        return
    _print(f"[{phase}/{total}] {message}")


def log_detail(message: str, indent: int = 6, verbose_only: bool = False) -> None:
    """
    Log a detail message (indented).

    Args:
        message: Detail message
        indent: Number of spaces to indent (default 6)
        verbose_only: If True, only print if verbose mode is enabled
    """
    if verbose_only and not _verbose:
        return
    _print(f"{' ' * indent}{message}")


def log_artifact(kind: str, path: Path, verbose_only: bool = False) -> None:
    """
    Log a generated artifact.

    Format: [kind] path

    Args:
        kind: Artifact kind (e.g. 'config', 'version', 'manifest')
        path: Path of the written file
        verbose_only: If True, only print if verbose mode is enabled
    """
    if verbose_only and not _verbose:
        return
    _print(f"      [{kind}] {path}")


class TimedLogger:
    """
    Context manager for logging with elapsed time tracking.

    Usage:
        with TimedLogger("Writing FooConfig.cmake", phase=(4, 7)) as timed:
            writer.write(...)
            timed.detail("3 usage requirement sets")
        # Logs completion time on success
    """

    def __init__(self, operation: str, phase: Optional[tuple[int, int]] = None, verbose_only: bool = False):
        self.operation = operation
        self.phase = phase
        self.verbose_only = verbose_only
        self.start_time = 0.0

    def __enter__(self) -> "TimedLogger":
        self.start_time = time.time()
        if self.phase:
            log_phase(self.phase[0], self.phase[1], f"{self.operation}...", self.verbose_only)
        else:
            log(f"{self.operation}...", self.verbose_only)
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        del exc_val, exc_tb  # Unused
        elapsed = time.time() - self.start_time
        if exc_type is None:
            log_detail(f"Done ({elapsed:.2f}s)", verbose_only=True)
        return None

    def detail(self, message: str) -> None:
        """Log a detail message within this operation."""
        log_detail(message, verbose_only=self.verbose_only)


def log_error(message: str) -> None:
    """
    Log an error message.

    Args:
        message: Error message
    """
    _print(f"ERROR: {message}")


def log_warning(message: str) -> None:
    """
    Log a warning message.

    Args:
        message: Warning message
    """
    _print(f"WARNING: {message}")
