from typing import Optional


class AppRoleGrantError(Exception):
    """Base class for every fatal condition of a grant run."""


class ConfigError(AppRoleGrantError):
    pass


class AuthError(AppRoleGrantError):
    pass


class AmbiguousLookup(AppRoleGrantError):
    """A name search did not resolve to exactly one directory object."""

    def __init__(self, kind: str, query: str, count: int):
        self.kind = kind
        self.query = query
        self.count = count
        super().__init__(
            f"Expected exactly one {kind} matching '{query}', found {count}"
        )


class RoleNotFound(AppRoleGrantError):
    def __init__(self, role_name: str, application: str):
        self.role_name = role_name
        self.application = application
        super().__init__(
            f"App role '{role_name}' is not defined on application '{application}'"
        )


class CreateAssignmentError(AppRoleGrantError):
    """
    Raised by the directory client when the appRoleAssignments POST fails.

    Graph is known to report this failure even when the assignment was
    written, so the executor never lets it escape.
    """


class AssignmentNotConfirmed(AppRoleGrantError):
    def __init__(self, role_id: str, principal_id: str):
        self.role_id = role_id
        self.principal_id = principal_id
        super().__init__(
            f"Role {role_id} is not assigned to principal {principal_id} "
            "after the create attempt"
        )


class GraphApiError(RuntimeError):
    def __init__(self, status_code: int, body: str, url: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"Graph API error {status_code}: {body}")
