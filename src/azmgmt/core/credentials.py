"""
Token acquisition is delegated entirely to azure-identity. This module only decides
which credential to use by default, which scopes to ask for, and how to turn a token
into an Authorization header.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, cast

import azure.identity.aio
from azure.core.credentials_async import AsyncTokenCredential


_DEFAULT_CREDENTIAL_OPTIONS = {
    "exclude_visual_studio_code_credential": True,
    "exclude_environment_credential": True,
    "exclude_shared_token_cache_credential": True,
}

_DEFAULT_SCOPE_SUFFIX = "/.default"


def get_credential_aio() -> AsyncTokenCredential:
    return cast(
        AsyncTokenCredential,
        azure.identity.aio.DefaultAzureCredential(**_DEFAULT_CREDENTIAL_OPTIONS),
    )


def default_scopes(endpoint: str) -> List[str]:
    """
    E.g. https://management.azure.com -> https://management.azure.com/.default, which
    asks for all of the permissions configured for the app on that resource
    """
    return [endpoint.rstrip("/") + _DEFAULT_SCOPE_SUFFIX]


async def get_authorization_header(
    credential: AsyncTokenCredential, scopes: Sequence[str]
) -> Dict[str, str]:
    # azure-identity caches tokens and refreshes them as they get close to expiring, so
    # there's no point in caching here as well
    access_token = await credential.get_token(*scopes)
    return {"Authorization": f"Bearer {access_token.token}"}
