"""mimeref type / mimeref path — resolve locally or against a server."""
from __future__ import annotations

from typing import Any, Callable

import requests

from mimeref import client
from mimeref.commands import fail, print_results, record_to_dict
from mimeref.config import build_resolver
from mimeref.resolver import ConfigError


def _lookup_all(queries: list[str], lookup: Callable[[str], Any]) -> list[tuple[str, dict[str, Any]]]:
    return [(q, record_to_dict(lookup(q))) for q in queries]


def _run(args, kind: str) -> None:
    queries = args.queries
    if getattr(args, "remote", False):
        remote = client.lookup_type if kind == "type" else client.lookup_path
        try:
            results = _lookup_all(queries, remote)
        except requests.RequestException as e:
            fail(f"server request failed: {e}")
    else:
        try:
            resolver = build_resolver(use_overrides=not getattr(args, "no_config", False))
        except ConfigError as e:
            fail(str(e))
        local = resolver.type if kind == "type" else resolver.path
        results = _lookup_all(queries, local)

    print_results(results, as_json=getattr(args, "json", False))


def cmd_type(args) -> None:
    _run(args, "type")


def cmd_path(args) -> None:
    _run(args, "path")
