import logging
import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictInt, TypeAdapter, ValidationError, model_validator

from howmany import config

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s\-]+")


class DatasetError(ValueError):
    """Raised when a bundled dataset cannot be decoded."""


class Company(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    rank: int = 0
    name: str = ""
    symbol: str = ""
    employees: int = 0
    price: float = 0.0
    country: str = ""

    @model_validator(mode="before")
    @classmethod
    def _lower_case_fields(cls, data: Any) -> Any:
        # "Employees" and "employees" alike; null means the zero value
        if isinstance(data, dict):
            return {str(k).lower(): v for k, v in data.items() if v is not None}
        return data


@dataclass(frozen=True)
class Location:
    name: str
    population: int


def canonical_key(name: str) -> str:
    """Lower-case `name` and join its words with single hyphens.

    "Johnson & Johnson", "johnson-&-johnson" and "JOHNSON  &  JOHNSON" all
    give "johnson-&-johnson". Applying it twice changes nothing.
    """
    return _SEPARATORS.sub("-", name.strip().lower()).strip("-")


def location_key(name: str) -> str:
    """Same as canonical_key but joined with spaces, for location names."""
    return _SEPARATORS.sub(" ", name.strip().lower()).strip()


def company_key(name: str) -> str:
    """Drop any parenthesised suffix such as " (NYSE)" before canonicalizing."""
    head, _, _ = name.partition(" (")
    return canonical_key(head)


@dataclass(frozen=True)
class Dataset:
    """Read-only view over the company list and the population table."""

    companies: Mapping[str, Company]
    locations: Mapping[str, Location]

    def company(self, segment: str) -> Optional[Company]:
        return self.companies.get(canonical_key(segment))

    def population(self, segment: str) -> Optional[Location]:
        return self.locations.get(location_key(segment))


_companies = TypeAdapter(List[Company])
_populations = TypeAdapter(Dict[str, StrictInt])


def parse_companies(raw: Union[bytes, str]) -> Dict[str, Company]:
    try:
        data = _companies.validate_json(raw)
    except ValidationError as exc:
        raise DatasetError(f"companies: {exc}") from exc

    return {company_key(company.name): company for company in data}


def parse_populations(raw: Union[bytes, str]) -> Dict[str, Location]:
    try:
        data = _populations.validate_json(raw)
    except ValidationError as exc:
        raise DatasetError(f"populations: {exc}") from exc

    locations = {}
    for name, population in data.items():
        if population <= 0:
            logger.warning("Skipping %r: population %d is not positive", name, population)
            continue
        locations[location_key(name)] = Location(name=name, population=population)
    return locations


def load_dataset(companies_raw: Union[bytes, str], populations_raw: Union[bytes, str]) -> Dataset:
    companies = parse_companies(companies_raw)
    locations = parse_populations(populations_raw)
    logger.info("Loaded %d companies and %d locations", len(companies), len(locations))
    return Dataset(
        companies=MappingProxyType(companies),
        locations=MappingProxyType(locations),
    )


def load_dataset_files(
    companies_path: Optional[Path] = None,
    populations_path: Optional[Path] = None,
) -> Dataset:
    companies_path = Path(companies_path or config.COMPANIES_FILE)
    populations_path = Path(populations_path or config.POPULATIONS_FILE)

    logger.info("Reading %s and %s", companies_path, populations_path)
    try:
        companies_raw = companies_path.read_bytes()
        populations_raw = populations_path.read_bytes()
    except OSError as exc:
        raise DatasetError(f"cannot read dataset: {exc}") from exc

    return load_dataset(companies_raw, populations_raw)
