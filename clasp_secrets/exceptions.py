"""Custom exception hierarchy for clasp-secrets.

This module defines the errors raised while running the external ``gh``
program, reading or writing the clasp credentials file, and loading
configuration.

Exception Hierarchy:
    ClaspSecretsError (base)
    ├── ConfigurationError
    ├── CommandError
    │   ├── ExecutableNotFoundError
    │   ├── InvocationError
    │   └── CommandFailedError
    └── CredentialError
        ├── MissingCredentialsFileError
        └── CredentialFormatError

Example Usage:
    >>> from clasp_secrets.exceptions import CommandFailedError
    >>> try:
    ...     run_gh("secret", "set", "CLASPRC_JSON", "-R", repo, check=True)
    ... except CommandFailedError as e:
    ...     print(e.returncode, e.stderr)
"""


class ClaspSecretsError(Exception):
    """Base exception for all clasp-secrets errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(ClaspSecretsError):
    """Configuration-related errors.

    Raised when export settings cannot be loaded from the environment.
    """

    pass


class CommandError(ClaspSecretsError):
    """Errors raised while running an external program.

    Attributes:
        message: Human-readable error description
        program: Name of the program that was invoked
    """

    def __init__(self, message: str, program: str | None = None) -> None:
        self.program = program
        super().__init__(message)


class ExecutableNotFoundError(CommandError):
    """The external program could not be located on PATH.

    Callers treat this separately from other failures because the fix is
    always the same: install the program.
    """

    def __init__(self, program: str) -> None:
        """Initialize exception.

        Args:
            program: Name of the missing executable
        """
        self.suggestion = f"Install {program} and make sure it is on your PATH"
        if program == "gh":
            message = "GitHub CLI (gh) not found. Please install it first."
        else:
            message = f"{program} not found. Please install it first."
        super().__init__(message, program=program)


class InvocationError(CommandError):
    """The program could not be started for a reason other than a missing binary."""

    pass


class CommandFailedError(CommandError):
    """The program ran but exited with a non-zero status.

    Attributes:
        returncode: Exit status of the process
        stderr: Captured standard error, stripped
    """

    def __init__(self, program: str, returncode: int, stderr: str) -> None:
        """Initialize exception.

        Args:
            program: Name of the program that failed
            returncode: Exit status of the process
            stderr: Captured standard error
        """
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr or "Unknown error"
        super().__init__(f"{program} command failed: {detail}", program=program)


class CredentialError(ClaspSecretsError):
    """Credentials file errors.

    Attributes:
        message: Human-readable error description
        path: Path of the credentials file involved
        suggestion: Optional suggestion for resolution
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            path: Path of the credentials file involved
            suggestion: Optional suggestion for resolution
        """
        self.path = path
        self.suggestion = suggestion

        full_message = message
        if path:
            full_message = f"{message} (path: {path})"
        if suggestion:
            full_message = f"{full_message}\nSuggestion: {suggestion}"

        super().__init__(full_message)
        # Preserve original message (super sets self.message to full_message)
        self.message = message


class MissingCredentialsFileError(CredentialError):
    """The clasp credentials file does not exist."""

    pass


class CredentialFormatError(CredentialError):
    """Credentials content is not valid JSON or base64."""

    pass
