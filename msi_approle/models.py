from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

APPLICATION_TYPE = "Application"
MANAGED_IDENTITY_TYPE = "ManagedIdentity"


@dataclass
class AppRole:
    id: str
    value: Optional[str]
    display_name: Optional[str] = None
    allowed_member_types: List[str] = field(default_factory=list)
    is_enabled: bool = True

    @classmethod
    def from_graph(cls, data: Dict[str, Any]) -> "AppRole":
        return cls(
            id=data["id"],
            value=data.get("value"),
            display_name=data.get("displayName"),
            allowed_member_types=data.get("allowedMemberTypes") or [],
            is_enabled=data.get("isEnabled", True),
        )


@dataclass
class Application:
    id: str
    app_id: Optional[str]
    display_name: str
    app_roles: List[AppRole] = field(default_factory=list)

    @classmethod
    def from_graph(cls, data: Dict[str, Any]) -> "Application":
        return cls(
            id=data["id"],
            app_id=data.get("appId"),
            display_name=data.get("displayName", "") or "",
            app_roles=[AppRole.from_graph(r) for r in data.get("appRoles") or []],
        )


@dataclass
class ServicePrincipal:
    id: str
    app_id: Optional[str]
    display_name: str
    service_principal_type: Optional[str]

    @classmethod
    def from_graph(cls, data: Dict[str, Any]) -> "ServicePrincipal":
        return cls(
            id=data["id"],
            app_id=data.get("appId"),
            display_name=data.get("displayName", "") or "",
            service_principal_type=data.get("servicePrincipalType"),
        )


@dataclass
class AppRoleAssignment:
    id: Optional[str]
    principal_id: Optional[str]
    resource_id: Optional[str]
    app_role_id: Optional[str]

    @classmethod
    def from_graph(cls, data: Dict[str, Any]) -> "AppRoleAssignment":
        return cls(
            id=data.get("id"),
            principal_id=data.get("principalId"),
            resource_id=data.get("resourceId"),
            app_role_id=data.get("appRoleId"),
        )


@dataclass
class GrantResult:
    resource_application_name: str
    role_name: str
    role_id: str
    resource_id: Optional[str]
    principal_id: Optional[str]
    assignment: AppRoleAssignment
