"""
ChefIQ appliance catalog.

The analyzer only reads `thing_category_name` (to match a method pattern's
appliance type) and `category_id` (written into each CookingAction).
A catalog can be replaced from a JSON file via ANALYZER settings.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from chefiq_analyzer.exceptions import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Appliance:
    """A ChefIQ device category."""

    category_id: str
    name: str
    thing_category_name: str
    short_code: str | None = None
    supports_probe: bool = False


CHEFIQ_APPLIANCES: tuple[Appliance, ...] = (
    Appliance(
        category_id="c8ff3aef-3de6-4a74-bba6-03e943b2762c",
        name="iQ Cooker",
        thing_category_name="cooker",
        short_code="SC",
    ),
    Appliance(
        category_id="a542fa25-5053-4946-8b77-e358467baa0f",
        name="iQ Sense",
        thing_category_name="sense",
    ),
    Appliance(
        category_id="4a3cd4f1-839b-4f45-80ea-08f594ff74c3",
        name="iQ MiniOven",
        thing_category_name="oven",
        supports_probe=True,
    ),
)

# Old short ids still found in saved recipes
LEGACY_APPLIANCE_IDS: dict[str, str] = {
    "rj40": "c8ff3aef-3de6-4a74-bba6-03e943b2762c",
    "cq60": "a542fa25-5053-4946-8b77-e358467baa0f",
    "cq50": "4a3cd4f1-839b-4f45-80ea-08f594ff74c3",
}


class ApplianceCatalog:
    """Read-only lookup over a set of appliances."""

    def __init__(self, appliances: list[Appliance] | tuple[Appliance, ...]):
        self._appliances = tuple(appliances)
        self._by_type = {a.thing_category_name: a for a in self._appliances}
        self._by_id = {a.category_id: a for a in self._appliances}

    def __iter__(self):
        return iter(self._appliances)

    def __len__(self) -> int:
        return len(self._appliances)

    def by_type(self, thing_category_name: str) -> Appliance | None:
        """Find the appliance for a method pattern's appliance type."""
        return self._by_type.get(thing_category_name)

    def by_id(self, category_id: str) -> Appliance | None:
        """Find an appliance by category id, accepting legacy short ids."""
        category_id = LEGACY_APPLIANCE_IDS.get(category_id, category_id)
        return self._by_id.get(category_id)

    @classmethod
    def from_json(cls, path: str | Path) -> ApplianceCatalog:
        """
        Load a catalog from a JSON list of appliance objects.

        Each object needs `category_id`, `name` and `thing_category_name`;
        `short_code` and `supports_probe` are optional.

        Raises:
            CatalogError: file unreadable, not a list, or entries missing keys
        """
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Could not read appliance catalog {path}: {e}") from e

        if not isinstance(raw, list):
            raise CatalogError(f"Appliance catalog {path} must be a JSON list")

        appliances = []
        for entry in raw:
            try:
                appliances.append(
                    Appliance(
                        category_id=entry["category_id"],
                        name=entry["name"],
                        thing_category_name=entry["thing_category_name"],
                        short_code=entry.get("short_code"),
                        supports_probe=bool(entry.get("supports_probe", False)),
                    )
                )
            except (KeyError, TypeError, AttributeError) as e:
                raise CatalogError(f"Invalid appliance entry in {path}: {entry!r}") from e

        logger.info(f"Loaded {len(appliances)} appliances from {path}")
        return cls(appliances)


def get_default_catalog() -> ApplianceCatalog:
    """Built-in catalog, or the one named by APPLIANCE_CATALOG_PATH."""
    from chefiq_analyzer.config import get_settings

    path = get_settings().appliance_catalog_path
    if path:
        return ApplianceCatalog.from_json(path)
    return ApplianceCatalog(CHEFIQ_APPLIANCES)
