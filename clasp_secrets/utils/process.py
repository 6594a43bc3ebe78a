"""Synchronous subprocess execution for external command-line programs.

Every call runs one process to completion without a shell: arguments are
passed as a discrete list so repository identifiers and other user input
are never subject to shell parsing.

This module offers two functions:
    - run_command: Execute any program with list arguments
    - run_gh: Shortcut for the GitHub CLI (``gh``)

Example:
    >>> from clasp_secrets.utils.process import run_gh
    >>> result = run_gh("api", "repos/owner/repo")
    >>> if result.returncode == 0:
    ...     print(result.stdout)

See Also:
    - subprocess.run: Underlying blocking subprocess API
"""

import subprocess  # nosec B404 # Required for gh invocations with list arguments
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from clasp_secrets.exceptions import (
    CommandFailedError,
    ExecutableNotFoundError,
    InvocationError,
)

log = structlog.get_logger(__name__)

GH_PROGRAM = "gh"


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of a single process invocation.

    Attributes:
        args: Full argument vector, program first
        stdout: Decoded and stripped standard output
        stderr: Decoded and stripped standard error
        returncode: Process exit status
    """

    args: tuple[str, ...]
    stdout: str
    stderr: str
    returncode: int

    @property
    def ok(self) -> bool:
        """Whether the process exited with status 0."""
        return self.returncode == 0


def run_command(
    program: str,
    args: Sequence[str],
    *,
    input_text: str | None = None,
    check: bool = False,
) -> CommandResult:
    """Run a program to completion and capture its output.

    Args:
        program: Executable name, resolved through PATH.
        args: Arguments passed to the program, one list element each.
        input_text: Optional text written to the process's standard input.
            Use this for payloads that must not appear on the command line.
        check: If True, raise CommandFailedError when the program exits
            with a non-zero status. If False (default), return the result
            and let the caller interpret the exit status.

    Returns:
        CommandResult with stdout, stderr and exit status.

    Raises:
        ExecutableNotFoundError: If the program cannot be found.
        InvocationError: If the process could not be started for any other reason.
        CommandFailedError: If check=True and the program exits non-zero.

    Note:
        There is no timeout. The call blocks until the program exits.
    """
    argv = [program, *args]
    log.debug("command_started", program=program, args=list(args), has_input=input_text is not None)

    try:
        completed = subprocess.run(  # nosec B603 # List arguments, no shell
            argv,
            input=input_text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as e:
        log.debug("command_not_found", program=program)
        raise ExecutableNotFoundError(program) from e
    except (OSError, ValueError) as e:
        # ValueError covers arguments the OS cannot accept, e.g. embedded NUL bytes
        log.error("command_invocation_failed", program=program, error=str(e))
        raise InvocationError(f"Failed to run {program}: {e}", program=program) from e

    result = CommandResult(
        args=tuple(argv),
        stdout=(completed.stdout or "").strip(),
        stderr=(completed.stderr or "").strip(),
        returncode=completed.returncode,
    )
    log.debug("command_finished", program=program, returncode=result.returncode)

    if check and not result.ok:
        raise CommandFailedError(program, result.returncode, result.stderr)

    return result


def run_gh(*args: str, input_text: str | None = None, check: bool = False) -> CommandResult:
    """Run the GitHub CLI with the given arguments.

    Args:
        *args: Arguments for ``gh``, e.g. "secret", "set", "NAME".
        input_text: Optional standard-input payload.
        check: Raise CommandFailedError on a non-zero exit.

    Returns:
        CommandResult for the invocation.
    """
    return run_command(GH_PROGRAM, args, input_text=input_text, check=check)
