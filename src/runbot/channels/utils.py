"""Channel utility helpers."""

from __future__ import annotations


def resolve_proxy(explicit_proxy: str | None) -> tuple[str | None, str]:
    if explicit_proxy and explicit_proxy.strip():
        return explicit_proxy.strip(), "explicit"

    # Ambient HTTP(S)_PROXY variables are not honoured for the gateway.
    return None, "none"
