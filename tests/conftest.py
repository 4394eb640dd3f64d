import pytest

from msi_approle.exceptions import CreateAssignmentError
from msi_approle.models import (
    Application,
    AppRole,
    AppRoleAssignment,
    ServicePrincipal,
)


class FakeDirectory:
    """In-memory directory that records every call made against it."""

    def __init__(
        self,
        applications=None,
        service_principals=None,
        assignments_after_create=None,
        create_error=None,
    ):
        # query -> results
        self.applications = applications or {}
        self.service_principals = service_principals or {}
        self.assignments_after_create = assignments_after_create or []
        self.create_error = create_error
        self.calls = []

    def find_applications_by_name(self, query):
        self.calls.append(("find_applications_by_name", query))
        return list(self.applications.get(query, []))

    def find_service_principals_by_name(self, query):
        self.calls.append(("find_service_principals_by_name", query))
        return list(self.service_principals.get(query, []))

    def create_role_assignment(self, principal_id, resource_id, role_id):
        self.calls.append(
            ("create_role_assignment", principal_id, resource_id, role_id)
        )
        if self.create_error is not None:
            raise self.create_error
        return AppRoleAssignment("new", principal_id, resource_id, role_id)

    def list_role_assignments(self, principal_id):
        self.calls.append(("list_role_assignments", principal_id))
        return list(self.assignments_after_create)

    def call_names(self):
        return [c[0] for c in self.calls]


def make_app(name="Api1", roles=(("Admin", "role-123"),)):
    return Application(
        id=f"{name}-obj",
        app_id=f"{name}-appid",
        display_name=name,
        app_roles=[AppRole(id=rid, value=value) for value, rid in roles],
    )


def make_sp(sp_id, name, sp_type):
    return ServicePrincipal(
        id=sp_id, app_id=None, display_name=name, service_principal_type=sp_type
    )


@pytest.fixture
def scenario_directory():
    """Api1 defines Admin/role-123, res-1 is its principal, msi-1 is the MSI."""
    return FakeDirectory(
        applications={"Api1": [make_app()]},
        service_principals={
            "Api1": [make_sp("res-1", "Api1", "Application")],
            "Msi1": [make_sp("msi-1", "Msi1", "ManagedIdentity")],
        },
        assignments_after_create=[
            AppRoleAssignment("a-1", "msi-1", "res-1", "role-123")
        ],
        create_error=CreateAssignmentError("Permission being assigned already exists"),
    )
