import json
import sys
from typing import Any, Mapping

from mimeref.entry import MimeEntry


def record_to_dict(record: Any) -> dict[str, Any]:
    """Serializable view of a lookup result. Predicates are dropped."""
    if isinstance(record, MimeEntry):
        return record.to_dict()
    if isinstance(record, Mapping):
        return {k: v for k, v in record.items() if k != "predicate"}
    raise TypeError(f"cannot serialize lookup result of type {type(record).__name__}")


def format_line(query: str, record: Mapping[str, Any]) -> str:
    """query, type, compressible, charset, extensions — tab separated, '-' when unknown."""
    compressible = record.get("compressible")
    if compressible is None:
        compressible_col = "-"
    else:
        compressible_col = "yes" if compressible else "no"
    extensions = record.get("extensions")
    return "\t".join([
        query,
        record.get("type") or "-",
        compressible_col,
        record.get("charset") or "-",
        ",".join(extensions) if extensions else "-",
    ])


def print_results(results: list[tuple[str, dict[str, Any]]], as_json: bool = False) -> None:
    if as_json:
        print(json.dumps([{"query": q, **rec} for q, rec in results], indent=2))
        return
    for query, rec in results:
        print(format_line(query, rec))


def get_version() -> str:
    # Prefer pyproject.toml so editable installs always reflect the latest version
    try:
        try:
            import tomllib
        except ImportError:
            import tomli as tomllib  # type: ignore[no-redef]
        from pathlib import Path
        pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    except Exception:
        pass
    try:
        from importlib.metadata import version
        return version("mimeref")
    except Exception:
        return "unknown"


def fail(message: str) -> None:
    print(f"mimeref: {message}", file=sys.stderr)
    sys.exit(1)
