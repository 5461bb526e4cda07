"""Error types raised by reassign-reviewer operations.

Every error carries the process exit code the CLI uses when it reaches the
top level. Gateways raise these; the command prints them and exits.
"""


class ReassignError(Exception):
    """Base class for all user-facing reassign-reviewer failures."""

    exit_code: int = 1


class AuthError(ReassignError):
    """The GitHub CLI is not authenticated or the credentials were rejected."""


class NetworkError(ReassignError):
    """A gh call failed before GitHub produced an HTTP response."""


class ApiError(ReassignError):
    """GitHub answered with a non-2xx status or a GraphQL error payload."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ValidationError(ReassignError):
    """Command-line input was rejected before any network call."""


class EmptyResultError(ReassignError):
    """A lookup returned nothing to choose from."""


class UserCancelled(ReassignError):
    """The user declined the confirmation or aborted a selection list.

    A declined confirmation is a normal outcome and exits 0; aborting a
    selection list exits 1.
    """

    def __init__(self, message: str, *, declined: bool = False) -> None:
        super().__init__(message)
        self.declined = declined
        self.exit_code = 0 if declined else 1
