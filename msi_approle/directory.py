import logging
from typing import Dict, List, Optional
from .graph_client import GraphClient
from .config import GRAPH_BASE
from .exceptions import CreateAssignmentError, GraphApiError
from .models import Application, AppRoleAssignment, ServicePrincipal


def _display_name_filter(query: str) -> Dict[str, str]:
    # OData string literals escape a quote by doubling it
    escaped = query.replace("'", "''")
    return {"$filter": f"startswith(displayName,'{escaped}')"}


class DirectoryClient:
    """
    Directory operations needed to grant an app role, backed by Microsoft Graph.

    Name searches are display-name prefix matches; callers decide what to do
    with zero or several results.
    """

    def __init__(self, client: GraphClient, graph_base: Optional[str] = None):
        self.client = client
        self.graph_base = graph_base or GRAPH_BASE

    def find_applications_by_name(self, query: str) -> List[Application]:
        items = self.client.paged_get(
            f"{self.graph_base}/applications", params=_display_name_filter(query)
        )
        return [Application.from_graph(item) for item in items]

    def find_service_principals_by_name(self, query: str) -> List[ServicePrincipal]:
        items = self.client.paged_get(
            f"{self.graph_base}/servicePrincipals", params=_display_name_filter(query)
        )
        return [ServicePrincipal.from_graph(item) for item in items]

    def create_role_assignment(
        self, principal_id: str, resource_id: str, role_id: str
    ) -> Optional[AppRoleAssignment]:
        payload = {
            "principalId": principal_id,
            "resourceId": resource_id,
            "appRoleId": role_id,
        }
        try:
            data = self.client.post(
                f"{self.graph_base}/servicePrincipals/{principal_id}/appRoleAssignments",
                payload,
            )
        except GraphApiError as e:
            raise CreateAssignmentError(
                f"Creating assignment of role {role_id} for {principal_id} failed: {e}"
            ) from e
        logging.debug(f"appRoleAssignments POST returned: {data}")
        return AppRoleAssignment.from_graph(data) if data else None

    def list_role_assignments(self, principal_id: str) -> List[AppRoleAssignment]:
        items = self.client.paged_get(
            f"{self.graph_base}/servicePrincipals/{principal_id}/appRoleAssignments"
        )
        return [AppRoleAssignment.from_graph(item) for item in items]
