"""How many? Compare a company's head count with the population of a place."""

__version__ = "0.1.0"
