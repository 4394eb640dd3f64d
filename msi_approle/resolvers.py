import logging
from typing import Callable, Iterable, TypeVar
from .directory import DirectoryClient
from .exceptions import AmbiguousLookup, RoleNotFound
from .models import APPLICATION_TYPE, MANAGED_IDENTITY_TYPE

T = TypeVar("T")


def resolve_single(
    items: Iterable[T], predicate: Callable[[T], bool], kind: str, query: str
) -> T:
    """Return the only item accepted by `predicate`, else raise AmbiguousLookup."""
    matches = [item for item in items if predicate(item)]
    if len(matches) != 1:
        raise AmbiguousLookup(kind, query, len(matches))
    return matches[0]


def resolve_role_id(
    directory: DirectoryClient, resource_application_name: str, role_name: str
) -> str:
    app = resolve_single(
        directory.find_applications_by_name(resource_application_name),
        lambda a: True,
        "application",
        resource_application_name,
    )
    logging.info(f"Found application '{app.display_name}' ({app.app_id})")

    # exact, case-sensitive on the role's value
    for role in app.app_roles:
        if role.value == role_name:
            logging.info(f"Found app role '{role_name}' ({role.id})")
            return role.id
    raise RoleNotFound(role_name, app.display_name)


def _resolve_principal_id(
    directory: DirectoryClient, query: str, principal_type: str, kind: str
) -> str:
    sp = resolve_single(
        directory.find_service_principals_by_name(query),
        lambda p: p.service_principal_type == principal_type,
        kind,
        query,
    )
    logging.info(f"Found {kind} '{sp.display_name}' ({sp.id})")
    return sp.id


def resolve_resource_principal_id(
    directory: DirectoryClient, resource_application_name: str
) -> str:
    return _resolve_principal_id(
        directory,
        resource_application_name,
        APPLICATION_TYPE,
        "resource service principal",
    )


def resolve_msi_principal_id(
    directory: DirectoryClient, msi_service_principal_name: str
) -> str:
    return _resolve_principal_id(
        directory,
        msi_service_principal_name,
        MANAGED_IDENTITY_TYPE,
        "managed identity service principal",
    )
