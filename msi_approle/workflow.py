import logging
from .assignment import assign_and_confirm
from .directory import DirectoryClient
from .models import GrantResult
from .resolvers import (
    resolve_msi_principal_id,
    resolve_resource_principal_id,
    resolve_role_id,
)


def grant_app_role(
    directory: DirectoryClient,
    resource_application_name: str,
    role_name: str,
    msi_service_principal_name: str,
) -> GrantResult:
    """
    Grant `role_name` of the resource application to a managed identity.

    Steps run strictly in order and the first failure aborts the run; nothing
    is rolled back.
    """
    for arg_name, value in (
        ("resource_application_name", resource_application_name),
        ("role_name", role_name),
        ("msi_service_principal_name", msi_service_principal_name),
    ):
        if not value:
            raise ValueError(f"{arg_name} must be a non-empty string")

    role_id = resolve_role_id(directory, resource_application_name, role_name)
    resource_id = resolve_resource_principal_id(directory, resource_application_name)
    principal_id = resolve_msi_principal_id(directory, msi_service_principal_name)

    assignment = assign_and_confirm(directory, principal_id, resource_id, role_id)
    logging.info(
        f"Confirmed: '{msi_service_principal_name}' holds role '{role_name}' "
        f"on '{resource_application_name}'"
    )
    return GrantResult(
        resource_application_name=resource_application_name,
        role_name=role_name,
        role_id=role_id,
        resource_id=resource_id,
        principal_id=principal_id,
        assignment=assignment,
    )
