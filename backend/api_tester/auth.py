import base64
from typing import Dict, Tuple

import httpx

from .models import ApiKeyAuth, ApiKeyLocation, AuthConfig, BasicAuth, BearerAuth


def basic_credentials(username: str, password: str) -> str:
    token = f"{username}:{password}".encode("utf-8")
    return base64.b64encode(token).decode("ascii")


def resolve_auth(
    auth: AuthConfig, headers: Dict[str, str], url: str
) -> Tuple[Dict[str, str], str]:
    """Apply the auth configuration to a header mapping and URL.

    Incomplete credentials are skipped rather than reported, so the request
    still goes out without auth. The input mapping is not modified.
    """
    headers = dict(headers)

    if isinstance(auth, BearerAuth):
        if auth.token:
            headers["Authorization"] = f"Bearer {auth.token}"
    elif isinstance(auth, BasicAuth):
        if auth.username and auth.password:
            headers["Authorization"] = (
                f"Basic {basic_credentials(auth.username, auth.password)}"
            )
    elif isinstance(auth, ApiKeyAuth):
        if auth.key and auth.value:
            if auth.location == ApiKeyLocation.QUERY:
                url = str(httpx.URL(url).copy_set_param(auth.key, auth.value))
            else:
                headers[auth.key] = auth.value

    return headers, url
