"""
Syntax registry: loads the property-key table from YAML at startup,
validates it, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
The table is loaded and validated once at import time. Nothing writes to
the registry after startup.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from .types import PropertyKey, PropertyKeyEntry

_DATA_DIR = Path(__file__).parent / "data"


class SyntaxRegistry:
    """
    Read-only registry of property key tokens.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        # Type annotations only; actual assignment happens in _load_property_keys
        self.property_keys: MappingProxyType[PropertyKey, PropertyKeyEntry]
        self._duplicates: tuple[str, ...]

        self._load_property_keys()
        self._validate()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Syntax data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse syntax data file {path}: {exc}") from exc

    def _load_property_keys(self) -> None:
        data = self._load_yaml("property_keys.yaml")
        if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
            raise ValueError("property_keys.yaml must contain an 'entries' list")
        result: dict[PropertyKey, PropertyKeyEntry] = {}
        duplicates: list[str] = []
        for entry in data["entries"]:
            pk = PropertyKey(entry["id"])
            if pk in result:
                duplicates.append(pk.value)
            result[pk] = PropertyKeyEntry(
                id=pk,
                key=str(entry["key"]),
                description=(entry.get("description") or "").strip(),
            )
        self._duplicates = tuple(duplicates)
        self.property_keys = MappingProxyType(result)

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """
        Run at startup. Raises ValueError listing all problems found: keys
        defined twice, keys missing from the table, and tokens shared by
        more than one key.
        """
        errors: list[str] = [
            f"property key {d!r} is defined more than once" for d in self._duplicates
        ]
        for pk in PropertyKey:
            if pk not in self.property_keys:
                errors.append(f"property key {pk.value!r} has no entry in property_keys")
        owners: dict[str, PropertyKey] = {}
        for pk, entry in self.property_keys.items():
            if entry.key in owners:
                errors.append(
                    f"token {entry.key!r} is shared by {owners[entry.key].value!r} and {pk.value!r}"
                )
            else:
                owners[entry.key] = pk
        if errors:
            raise ValueError(
                "Syntax registry validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def token(self, key: PropertyKey) -> str:
        """Return the token spelling for *key*."""
        try:
            return self.property_keys[key].key
        except KeyError:
            raise KeyError(f"No token for property key {key!r}") from None


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time; read-only after construction, so it is
# safe to share across threads.

_registry: SyntaxRegistry = SyntaxRegistry()


def get_registry() -> SyntaxRegistry:
    """Return the module-level registry singleton."""
    return _registry
