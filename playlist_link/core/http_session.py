"""HTTP client management for upstream API calls."""

import httpx

# Global client cache
_clients: dict[str, httpx.AsyncClient] = {}


def get_client(
    name: str = "default",
    base_url: str = "",
    timeout: float = 30.0,
) -> httpx.AsyncClient:
    """
    Get or create a cached async HTTP client.

    Clients are reused to benefit from connection pooling. No retry transport
    is mounted: a failed call is reported to the caller immediately.

    Args:
        name: Client name for caching (use different names for different purposes)
        base_url: Base URL prepended to relative request paths
        timeout: Request timeout in seconds

    Returns:
        Configured httpx.AsyncClient instance
    """
    client = _clients.get(name)
    if client is not None and not client.is_closed:
        return client

    client = httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout),
        headers={"Accept": "application/json"},
    )
    _clients[name] = client
    return client


async def close_all_clients() -> None:
    """Close all cached clients."""
    clients = list(_clients.values())
    _clients.clear()
    for client in clients:
        await client.aclose()
