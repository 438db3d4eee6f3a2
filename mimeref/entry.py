"""MIME entry record: one type's metadata with defaulting."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

# Source label for entries built without an explicit provenance
SOURCE_DATASET = "mime-db"
# Source label for entries synthesized for types missing from the dataset
SOURCE_ADHOC = "mimeref"

_COMPRESSIBLE_RE = re.compile(r"^text/|\+json$|\+text$|\+xml$")

# Fields a dataset or override record may carry, in schema order
ENTRY_FIELDS = ("source", "extensions", "compressible", "charset", "predicate")


def is_compressible(mime_type: str) -> bool:
    return _COMPRESSIBLE_RE.search(mime_type) is not None


@dataclass
class MimeEntry:
    type: str
    source: str = SOURCE_DATASET
    extensions: list[str] = field(default_factory=list)
    compressible: Optional[bool] = None
    charset: Optional[str] = None
    predicate: Optional[Callable[["MimeEntry"], Any]] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.extensions is None:
            self.extensions = []
        if self.compressible is None:
            self.compressible = is_compressible(self.type)

    @classmethod
    def from_record(cls, mime_type: str, record: Mapping[str, Any]) -> "MimeEntry":
        """
        Build an entry from a dataset or override record.
        Fields present in the record win; absent fields keep the defaults.
        Unknown keys are ignored.
        """
        kwargs = {name: record[name] for name in ENTRY_FIELDS if name in record}
        if "extensions" in kwargs and kwargs["extensions"] is not None:
            kwargs["extensions"] = list(kwargs["extensions"])
        return cls(mime_type, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Serializable view; the predicate is never included."""
        return {
            "type": self.type,
            "source": self.source,
            "extensions": list(self.extensions),
            "compressible": self.compressible,
            "charset": self.charset,
        }
