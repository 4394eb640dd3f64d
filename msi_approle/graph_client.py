import requests
import msal
import logging
from typing import List, Dict, Any, Optional
from . import config
from .exceptions import AuthError, ConfigError, GraphApiError


class GraphClient:
    def __init__(self, token: Optional[str] = None):
        self.token = token or config.ACCESS_TOKEN or self._get_token()

    def _get_token(self) -> str:
        if not config.TENANT_ID or not config.CLIENT_ID:
            raise ConfigError(
                "AZ_TENANT_ID and AZ_CLIENT_ID must be set (or AZ_ACCESS_TOKEN)"
            )
        authority = f"https://login.microsoftonline.com/{config.TENANT_ID}"

        if config.CLIENT_SECRET:
            app = msal.ConfidentialClientApplication(
                config.CLIENT_ID,
                authority=authority,
                client_credential=config.CLIENT_SECRET,
            )
            result = app.acquire_token_for_client(scopes=config.GRAPH_SCOPES)
        else:
            result = self._sign_in_with_device_code(authority)

        if "access_token" not in result:
            raise AuthError(f"Failed to acquire token: {result}")
        return result["access_token"]

    def _sign_in_with_device_code(self, authority: str) -> Dict[str, Any]:
        app = msal.PublicClientApplication(config.CLIENT_ID, authority=authority)
        flow = app.initiate_device_flow(scopes=config.GRAPH_SCOPES)
        if "user_code" not in flow:
            raise AuthError(f"Failed to start device code sign-in: {flow}")
        print(flow["message"], flush=True)
        return app.acquire_token_by_device_flow(flow)

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def _check(self, resp: requests.Response) -> None:
        if resp.status_code >= 400:
            logging.error("Graph API error %s: %s", resp.status_code, resp.text)
            raise GraphApiError(resp.status_code, resp.text, url=resp.url)

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        resp = requests.get(
            url, headers=self._headers(), params=params, timeout=config.REQUEST_TIMEOUT
        )
        self._check(resp)
        return resp.json()

    def paged_get(
        self, url: str, params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        items = []
        while url:
            data = self.get(url, params)
            items.extend(data.get("value", []))
            url = data.get("@odata.nextLink")
            # nextLink already carries the query
            params = None
        return items

    def post(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        resp = requests.post(
            url, headers=self._headers(), json=payload, timeout=config.REQUEST_TIMEOUT
        )
        self._check(resp)
        if not resp.content:
            return {}
        return resp.json()
