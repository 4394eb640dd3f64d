import logging
from .directory import DirectoryClient
from .exceptions import AssignmentNotConfirmed
from .models import AppRoleAssignment


def assign_and_confirm(
    directory: DirectoryClient, principal_id: str, resource_id: str, role_id: str
) -> AppRoleAssignment:
    """
    Fire-and-confirm role assignment.

    The create call's reported outcome is not trusted: Graph regularly
    answers with an error for assignments it did write (or that already
    existed). Whatever it raises is logged and dropped, and the outcome is
    decided only by re-reading the assignments held by `principal_id`.

    The managed identity is both the object the assignment is created under
    and the principal receiving the role.
    """
    try:
        directory.create_role_assignment(principal_id, resource_id, role_id)
        logging.info("Create call for the role assignment reported success")
    except Exception as e:
        logging.warning(f"Create call for the role assignment failed, verifying: {e}")

    assignments = directory.list_role_assignments(principal_id)
    for assignment in assignments:
        if assignment.app_role_id == role_id:
            return assignment
    raise AssignmentNotConfirmed(role_id, principal_id)
