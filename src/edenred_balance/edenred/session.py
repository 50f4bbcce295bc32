from __future__ import annotations

import httpx

CONNECT_TIMEOUT = 5.0
POOL_TIMEOUT = 5.0
READ_TIMEOUT = 20.0
KEEPALIVE_EXPIRY = 2.0


def build_http_client(
    base_url: str,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """
    One pre-configured client shared by the login and movements calls.

    - TLS verification always on, proxies taken from HTTP(S)_PROXY / NO_PROXY
    - cookies live in memory only, for the lifetime of this client
    """
    return httpx.Client(
        base_url=base_url.rstrip("/"),
        timeout=httpx.Timeout(READ_TIMEOUT, connect=CONNECT_TIMEOUT, pool=POOL_TIMEOUT),
        limits=httpx.Limits(keepalive_expiry=KEEPALIVE_EXPIRY),
        verify=True,
        trust_env=True,
        cookies=httpx.Cookies(),
        transport=transport,
    )
