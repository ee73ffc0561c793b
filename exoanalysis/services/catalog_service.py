"""
Catalog Index
Holds the planet records and provides filtered views and name search
"""

import logging
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import pandas as pd

from exoanalysis.normalizer import PARSEC_TO_LIGHT_YEAR
from exoanalysis.schemas import CatalogFilter, CatalogStatistics, PlanetRecord
from exoanalysis.settings import settings

logger = logging.getLogger(__name__)


class CatalogIndex:
    """Immutable, ordered snapshot of planet records"""

    def __init__(self, records: Iterable[PlanetRecord]):
        self._records: Tuple[PlanetRecord, ...] = tuple(records)
        logger.debug("Catalog indexed with %d planets", len(self._records))

    @classmethod
    def from_records(cls, rows: Iterable[Union[PlanetRecord, Mapping[str, Any]]]) -> "CatalogIndex":
        """Build the index from mappings of catalog fields (or ready records)"""
        return cls(
            row if isinstance(row, PlanetRecord) else PlanetRecord.from_mapping(row)
            for row in rows
        )

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "CatalogIndex":
        """Build the index from a catalog table, one record per row"""
        return cls.from_records(df.to_dict(orient="records"))

    @property
    def records(self) -> Tuple[PlanetRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PlanetRecord]:
        return iter(self._records)

    def filter(self, criteria: Optional[CatalogFilter] = None, **params: Any) -> Tuple[PlanetRecord, ...]:
        """
        Return the records matching the filter, in catalog order.

        Accepts a CatalogFilter or its fields as keyword arguments; raw strings
        are accepted and fall back to the defaults when unreadable. Unknown
        record values compare as 0 for year, distance and mass.
        """
        if criteria is None:
            criteria = CatalogFilter(**params)
        query = criteria.query.lower()

        def matches(planet: PlanetRecord) -> bool:
            name = (planet.name or "").lower()
            year = planet.discovery_year or 0
            distance_ly = (planet.distance_parsecs or 0.0) * PARSEC_TO_LIGHT_YEAR
            mass = planet.mass or 0.0
            return (
                query in name
                and (not criteria.method or planet.discovery_method == criteria.method)
                and criteria.year_min <= year <= criteria.year_max
                and distance_ly <= criteria.distance_max_ly
                and criteria.mass_min <= mass <= criteria.mass_max
            )

        filtered = tuple(planet for planet in self._records if matches(planet))
        logger.debug("Filter kept %d of %d planets", len(filtered), len(self._records))
        return filtered

    def search_by_name(self, query: str, limit: Optional[int] = None) -> List[PlanetRecord]:
        """Case-insensitive substring search on planet names, capped at limit"""
        if limit is None:
            limit = settings.search_limit
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        needle = (query or "").strip().lower()
        results = []
        for planet in self._records:
            if len(results) >= limit:
                break
            if needle in (planet.name or "").lower():
                results.append(planet)
        return results

    def find_by_name(self, name: str) -> Optional[PlanetRecord]:
        """Exact name lookup, first match in catalog order"""
        for planet in self._records:
            if planet.name == name:
                return planet
        return None

    def discovery_methods(self) -> List[str]:
        """Distinct discovery methods, sorted"""
        return sorted({planet.discovery_method for planet in self._records if planet.discovery_method})

    def statistics(self, filtered: Optional[Iterable[PlanetRecord]] = None) -> CatalogStatistics:
        total = len(self._records)
        return CatalogStatistics(
            total=total,
            filtered=total if filtered is None else sum(1 for _ in filtered)
        )
