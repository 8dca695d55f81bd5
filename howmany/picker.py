import logging
import random
import re
from typing import List

from howmany import config
from howmany.data.get_data import Company, Dataset

logger = logging.getLogger(__name__)

_WORD_START = re.compile(r"(?<!\w)(\w)")


def title_case(text: str) -> str:
    """Upper-case the first letter of every word, leave the rest alone."""
    return _WORD_START.sub(lambda m: m.group(1).upper(), text)


def display_name(key: str, company: Company) -> str:
    # Title-case the lookup key unless that changes the length of the stored
    # name ("AT&T" survives, "Accenture (NYSE)" loses its suffix).
    # Known rough edge: same-length names with odd casing still get the key form.
    name = title_case(key.replace("-", " "))
    if len(name) == len(company.name):
        return company.name
    return name


def random_locations(dataset: Dataset, rng=random) -> List[str]:
    locations = [location.name for location in dataset.locations.values()]
    rng.shuffle(locations)
    return locations


def random_companies_with_more_employees_than(dataset: Dataset, n: int, rng=random) -> List[str]:
    companies = [
        display_name(key, company)
        for key, company in dataset.companies.items()
        if company.employees > n
    ]
    rng.shuffle(companies)
    return companies


def random_path(dataset: Dataset, rng=random) -> str:
    """Pick a location and a company that outnumbers it, as "/<Location>/<Company>"."""
    locations = random_locations(dataset, rng)
    if not locations:
        return config.FALLBACK_PATH

    location = dataset.population(locations[0])
    companies = random_companies_with_more_employees_than(dataset, location.population, rng)
    if not companies:
        logger.debug("No company outnumbers %s, using fallback", location.name)
        return config.FALLBACK_PATH

    return "/%s/%s" % (title_case(location.name), companies[0].replace(" ", "-"))
