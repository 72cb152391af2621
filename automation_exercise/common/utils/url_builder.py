from typing import Dict, Optional
from urllib.parse import urlencode


def build_url(
    base_url: str,
    additional_path: Optional[str] = None,
    query_params: Optional[Dict[str, str]] = None,
    ) -> str:
    """
    Build a complete URL with an optional extra path segment and query string.

    Examples:
        build_url('/api/v2/users') -> '/api/v2/users'
        build_url('/api/v2/users', 'profile') -> '/api/v2/users/profile'
        build_url('/api/v2/users', None, {'id': '123'}) -> '/api/v2/users?id=123'
    """
    url = base_url

    if additional_path:
        url += f"/{additional_path}"

    if query_params:
        url += f"?{urlencode(query_params)}"

    return url
