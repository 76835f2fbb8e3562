"""Nozzle catalog: immutable lookup of nozzle constants by identifier."""

import json
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from spray_planner.errors import CatalogError, NozzleNotFoundError
from spray_planner.models.nozzle import NozzleSpec

logger = logging.getLogger(__name__)

# Environment variable naming a JSON file with an alternate catalog
CATALOG_ENV_VAR = "SPRAY_PLANNER_NOZZLE_CATALOG"

# Built-in nozzles. Stored applications reference these ids, so the
# constants must not change.
DEFAULT_NOZZLES = (
    NozzleSpec(
        id="syngenta-025-xc",
        label="Syngenta 025 XC",
        brand="syngenta",
        k_factor=0.577,
        min_pressure_bar=1,
        max_pressure_bar=4,
    ),
    NozzleSpec(
        id="syngenta-04-xc",
        label="Syngenta 04 XC",
        brand="syngenta",
        k_factor=0.924,
        min_pressure_bar=1,
        max_pressure_bar=4,
    ),
    NozzleSpec(
        id="syngenta-08-xc",
        label="Syngenta 08 XC",
        brand="syngenta",
        k_factor=1.848,
        min_pressure_bar=1,
        max_pressure_bar=4,
    ),
    NozzleSpec(
        id="teejet-aixr11004",
        label="TeeJet AIXR11004",
        brand="teejet",
        k_factor=0.91,
        min_pressure_bar=1,
        max_pressure_bar=6,
    ),
    NozzleSpec(
        id="teejet-xrc11004",
        label="TeeJet XRC11004",
        brand="teejet",
        k_factor=0.91,
        min_pressure_bar=1,
        max_pressure_bar=6,
    ),
)


class NozzleCatalog(Mapping[str, NozzleSpec]):
    """
    Read-only mapping from nozzle identifier to NozzleSpec.

    Catalogs are built once and never mutated, so one instance can be shared
    by any number of calculators. Pass a custom catalog to work with a
    regional nozzle set instead of the built-in one.

    Example:
        >>> catalog = NozzleCatalog.default()
        >>> catalog.get("teejet-aixr11004").k_factor
        0.91
    """

    def __init__(self, nozzles: Iterable[NozzleSpec]) -> None:
        """
        Build a catalog from nozzle specs.

        Args:
            nozzles: Nozzle specs, kept in the given order

        Raises:
            CatalogError: If two specs share an identifier
        """
        entries: Dict[str, NozzleSpec] = {}
        for nozzle in nozzles:
            if nozzle.id in entries:
                raise CatalogError(f"Duplicate nozzle identifier: {nozzle.id!r}")
            entries[nozzle.id] = nozzle
        self._entries = MappingProxyType(entries)

    @classmethod
    def default(cls) -> "NozzleCatalog":
        """Return the built-in catalog."""
        return _DEFAULT_CATALOG

    def __getitem__(self, nozzle_id: str) -> NozzleSpec:
        return self._entries[nozzle_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, nozzle_id: str) -> NozzleSpec:  # type: ignore[override]
        """
        Resolve a nozzle identifier.

        Unlike ``Mapping.get`` this never returns None: an unknown identifier
        is an error, because every calculation depends on the nozzle constants.

        Args:
            nozzle_id: Catalog key

        Returns:
            The matching NozzleSpec

        Raises:
            NozzleNotFoundError: If the identifier is not in the catalog
        """
        try:
            return self._entries[nozzle_id]
        except KeyError:
            raise NozzleNotFoundError(nozzle_id) from None

    def by_brand(self, brand: str) -> List[NozzleSpec]:
        """Nozzles of one brand, in catalog order."""
        return [nozzle for nozzle in self._entries.values() if nozzle.brand == brand]

    def __repr__(self) -> str:
        return f"NozzleCatalog({list(self._entries)})"


_DEFAULT_CATALOG = NozzleCatalog(DEFAULT_NOZZLES)


def _nozzle_from_dict(entry: Mapping[str, Any], index: int) -> NozzleSpec:
    """Build a NozzleSpec from one JSON catalog entry."""
    required = ("id", "label", "brand", "kFactor", "minPressureBar", "maxPressureBar")
    missing = [key for key in required if key not in entry]
    if missing:
        raise CatalogError(f"Nozzle entry {index} is missing keys: {', '.join(missing)}")

    try:
        return NozzleSpec(
            id=str(entry["id"]),
            label=str(entry["label"]),
            brand=str(entry["brand"]),
            k_factor=float(entry["kFactor"]),
            min_pressure_bar=float(entry["minPressureBar"]),
            max_pressure_bar=float(entry["maxPressureBar"]),
        )
    except (TypeError, ValueError) as e:
        raise CatalogError(f"Invalid nozzle entry {index}: {e}") from e


def catalog_from_dicts(entries: Iterable[Mapping[str, Any]]) -> NozzleCatalog:
    """
    Build a catalog from plain dictionaries.

    Args:
        entries: Nozzle objects with the keys id, label, brand, kFactor,
            minPressureBar and maxPressureBar

    Returns:
        NozzleCatalog holding the entries in order

    Raises:
        CatalogError: If an entry is malformed or ids repeat
    """
    nozzles = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise CatalogError(f"Nozzle entry {index} must be an object")
        nozzles.append(_nozzle_from_dict(entry, index))
    return NozzleCatalog(nozzles)


def load_catalog(path: Union[str, Path]) -> NozzleCatalog:
    """
    Load a nozzle catalog from a JSON file.

    The file holds a list of nozzle objects, or an object with a "nozzles"
    list.

    Args:
        path: Path to the JSON file

    Returns:
        The loaded catalog

    Raises:
        FileNotFoundError: If the file does not exist
        CatalogError: If the content is not a valid catalog
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise FileNotFoundError(f"Nozzle catalog file not found: {catalog_path}")

    with open(catalog_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Nozzle catalog {catalog_path} is not valid JSON: {e}") from e

    if isinstance(data, Mapping):
        data = data.get("nozzles")
    if not isinstance(data, list):
        raise CatalogError(f"Nozzle catalog {catalog_path} must contain a list of nozzles")

    catalog = catalog_from_dicts(data)
    logger.info(f"Loaded {len(catalog)} nozzles from {catalog_path}")
    return catalog


def catalog_from_env(env_var: str = CATALOG_ENV_VAR) -> NozzleCatalog:
    """
    Return the catalog named by an environment variable, or the default.

    Args:
        env_var: Variable holding the path of a JSON catalog file

    Returns:
        The loaded catalog when the variable is set, else the built-in one
    """
    path: Optional[str] = os.getenv(env_var)
    if not path:
        return NozzleCatalog.default()
    logger.info(f"Using nozzle catalog from {env_var}={path}")
    return load_catalog(path)
