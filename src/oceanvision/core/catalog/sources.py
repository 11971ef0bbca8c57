"""
Upstream Biodiversity Sources
=============================

One adapter per upstream API. Each adapter knows its endpoint, its query
parameters, its response envelope and the field paths that map a raw row
into a PartialSpeciesRecord. Fields a source does not provide stay None.

Envelopes:
- WoRMS: bare JSON array (HTTP 204 when nothing matches)
- OBIS: {"results": [...]}
- FishBase: {"data": [...]}
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

import requests

from oceanvision.core.exceptions import SourceFetchError
from oceanvision.core.http import APIClient
from oceanvision.core.logger import get_logger
from oceanvision.models.species import (
    FISHBASE_SPECIES_URL,
    OBIS_CHECKLIST_URL,
    WORMS_VERNACULAR_URL,
    PartialSpeciesRecord,
    Range,
)

logger = get_logger(__name__)

# IUCN Red List category codes as reported by OBIS
IUCN_CATEGORIES = {
    "EX": "Extinct",
    "EW": "Extinct in the Wild",
    "CR": "Critically Endangered",
    "EN": "Endangered",
    "VU": "Vulnerable",
    "NT": "Near Threatened",
    "LC": "Least Concern",
    "DD": "Data Deficient",
    "NE": "Not Evaluated",
}

FISHBASE_IMAGE_URL = "https://www.fishbase.se/images/species"


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _number(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class SpeciesSource(ABC):
    """
    Base class for an upstream species source.

    Subclasses implement _request() to fetch raw payloads and parse() to map
    a payload into partial records. fetch() wraps both and converts every
    network or payload error into a SourceFetchError.
    """

    name: str = ""

    def __init__(self, client: APIClient) -> None:
        self.client = client

    def fetch(self) -> List[PartialSpeciesRecord]:
        """
        Fetch and parse this source.

        Raises:
            SourceFetchError: If the request fails or the payload is malformed.
        """
        try:
            records = []
            for payload in self._request():
                records.extend(self.parse(payload))
        except requests.RequestException as e:
            raise SourceFetchError(self.name, f"request failed: {e}", cause=e) from e
        except (ValueError, KeyError, TypeError) as e:
            raise SourceFetchError(self.name, f"malformed payload: {e}", cause=e) from e

        logger.debug(f"{self.name}: parsed {len(records)} records")
        return records

    @abstractmethod
    def _request(self) -> Iterable[Any]:
        """Yield decoded JSON payloads for this source."""

    @abstractmethod
    def parse(self, payload: Any) -> List[PartialSpeciesRecord]:
        """Map one decoded payload into partial records."""

    @staticmethod
    def _rows(payload: Any, key: Optional[str]) -> List[Dict[str, Any]]:
        """Unwrap the envelope, rejecting anything that is not a list of rows."""
        if payload is None:
            return []
        rows = payload if key is None else payload[key]
        if not isinstance(rows, list):
            raise ValueError(f"expected a list of records, got {type(rows).__name__}")
        return [row for row in rows if isinstance(row, dict)]


class WoRMSSource(SpeciesSource):
    """World Register of Marine Species, searched by vernacular name."""

    name = "WoRMS"

    def __init__(
        self,
        client: APIClient,
        terms: Optional[List[str]] = None,
        url: str = WORMS_VERNACULAR_URL,
    ) -> None:
        super().__init__(client)
        self.terms = list(terms or [])
        self.url = url.rstrip("/")

    def _request(self) -> Iterable[Any]:
        for term in self.terms:
            yield self.client.get(f"{self.url}/{term}", params={"like": "true", "offset": 1})

    def parse(self, payload: Any) -> List[PartialSpeciesRecord]:
        records = []
        for row in self._rows(payload, None):
            if row.get("isExtinct") == 1:
                continue
            name = _text(row.get("valid_name")) or _text(row.get("scientificname"))
            if not name:
                continue
            records.append(
                PartialSpeciesRecord(
                    scientific_name=name,
                    source=self.name,
                    kingdom=_text(row.get("kingdom")),
                    phylum=_text(row.get("phylum")),
                    order=_text(row.get("order")),
                    family=_text(row.get("family")),
                )
            )
        return records


class OBISSource(SpeciesSource):
    """Ocean Biodiversity Information System checklist."""

    name = "OBIS"

    def __init__(
        self,
        client: APIClient,
        taxonid: Optional[int] = None,
        size: int = 50,
        url: str = OBIS_CHECKLIST_URL,
    ) -> None:
        super().__init__(client)
        self.taxonid = taxonid
        self.size = size
        self.url = url

    def _request(self) -> Iterable[Any]:
        params: Dict[str, Any] = {"size": self.size}
        if self.taxonid is not None:
            params["taxonid"] = self.taxonid
        yield self.client.get(self.url, params=params)

    def parse(self, payload: Any) -> List[PartialSpeciesRecord]:
        records = []
        for row in self._rows(payload, "results"):
            rank = _text(row.get("taxonRank"))
            if rank and rank.lower() != "species":
                continue
            name = _text(row.get("scientificName"))
            if not name:
                continue
            category = _text(row.get("category"))
            records.append(
                PartialSpeciesRecord(
                    scientific_name=name,
                    source=self.name,
                    kingdom=_text(row.get("kingdom")),
                    phylum=_text(row.get("phylum")),
                    order=_text(row.get("order")),
                    family=_text(row.get("family")),
                    conservation_status=IUCN_CATEGORIES.get(category.upper(), category)
                    if category
                    else None,
                )
            )
        return records


class FishBaseSource(SpeciesSource):
    """FishBase species table."""

    name = "FishBase"

    def __init__(
        self,
        client: APIClient,
        limit: int = 50,
        url: str = FISHBASE_SPECIES_URL,
    ) -> None:
        super().__init__(client)
        self.limit = limit
        self.url = url

    def _request(self) -> Iterable[Any]:
        yield self.client.get(self.url, params={"limit": self.limit})

    def parse(self, payload: Any) -> List[PartialSpeciesRecord]:
        records = []
        for row in self._rows(payload, "data"):
            genus, species = _text(row.get("Genus")), _text(row.get("Species"))
            if not genus or not species:
                continue

            shallow = _number(row.get("DepthRangeShallow"))
            deep = _number(row.get("DepthRangeDeep"))
            depth = None
            if shallow is not None or deep is not None:
                depth = Range(min=shallow or 0.0, max=deep if deep is not None else shallow)

            length = _number(row.get("Length"))
            common_length = _number(row.get("CommonLength"))
            length_range = None
            if length is not None:
                length_range = Range(min=common_length or length, max=length, unit="cm")

            weight = _number(row.get("Weight"))
            picture = _text(row.get("PicPreferredName"))

            records.append(
                PartialSpeciesRecord(
                    scientific_name=f"{genus} {species}",
                    source=self.name,
                    common_name=_text(row.get("FBname")),
                    kingdom="Animalia",
                    phylum="Chordata",
                    depth=depth,
                    length=length_range,
                    weight=Range(min=0.0, max=weight, unit="g") if weight else None,
                    lifespan=_number(row.get("LongevityWild")),
                    description=_text(row.get("Comments")),
                    images=[f"{FISHBASE_IMAGE_URL}/{picture}"] if picture else None,
                )
            )
        return records
