"""Process-wide resolver for the lookup server."""
import threading

from mimeref.config import build_resolver
from mimeref.resolver import Resolver

_lock = threading.RLock()
_resolver: Resolver | None = None


def get_resolver() -> Resolver:
    if _resolver is None:
        raise RuntimeError("Resolver not initialized. Call init_resolver() first.")
    return _resolver


def init_resolver(resolver: Resolver | None = None) -> None:
    """Install resolver, or build one from config. No-op if already set."""
    global _resolver
    with _lock:
        if _resolver is not None:
            return
        _resolver = resolver if resolver is not None else build_resolver()
