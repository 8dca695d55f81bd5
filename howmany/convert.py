"""Turn CSV exports into the JSON datasets bundled with the service.

    howmany-convert companies companiesmarketcap.csv -o howmany/data/companies.json
    howmany-convert populations scb.csv -o howmany/data/populations.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from howmany import config

logger = logging.getLogger(__name__)

# companiesmarketcap.com export header -> dataset field
COMPANY_COLUMNS = {
    "Rank": "Rank",
    "Name": "Name",
    "Symbol": "Symbol",
    "employees_count": "Employees",
    "price (USD)": "Price",
    "country": "Country",
}


class MissingColumnError(ValueError):
    pass


def _require(df: pd.DataFrame, columns, source: Path) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise MissingColumnError(f"{source} is missing column(s): {', '.join(missing)}")


def companies_from_csv(csv_path: Path) -> List[Dict[str, Any]]:
    df = pd.read_csv(csv_path)
    _require(df, COMPANY_COLUMNS, csv_path)

    df = df[list(COMPANY_COLUMNS)].rename(columns=COMPANY_COLUMNS)
    df = df.dropna(subset=["Employees"]).copy()
    df["Employees"] = df["Employees"].astype(int)
    df["Rank"] = df["Rank"].fillna(0).astype(int)
    df["Price"] = df["Price"].fillna(0.0).astype(float)
    df[["Name", "Symbol", "Country"]] = df[["Name", "Symbol", "Country"]].fillna("").astype(str)

    return df.to_dict(orient="records")


def populations_from_csv(
    csv_path: Path,
    name_column: str = "location",
    population_column: str = "population",
) -> Dict[str, int]:
    df = pd.read_csv(csv_path)
    _require(df, [name_column, population_column], csv_path)

    df = df[[name_column, population_column]].dropna().copy()
    df[population_column] = pd.to_numeric(df[population_column], errors="coerce")
    df = df[df[population_column] > 0]

    return {
        str(name).strip(): int(population)
        for name, population in zip(df[name_column], df[population_column])
    }


def write_json(data: Any, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert CSV exports into How Many? datasets.")
    sub = parser.add_subparsers(dest="kind", required=True)

    companies = sub.add_parser("companies", help="companiesmarketcap.com employee export")
    companies.add_argument("csv", type=Path)
    companies.add_argument("-o", "--output", type=Path, default=config.DATA_DIR / "companies.json")

    populations = sub.add_parser("populations", help="location/population table")
    populations.add_argument("csv", type=Path)
    populations.add_argument("-o", "--output", type=Path, default=config.DATA_DIR / "populations.json")
    populations.add_argument("--name-column", default="location")
    populations.add_argument("--population-column", default="population")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )
    args = build_parser().parse_args(argv)

    try:
        if args.kind == "companies":
            data = companies_from_csv(args.csv)
        else:
            data = populations_from_csv(args.csv, args.name_column, args.population_column)
    except MissingColumnError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 2

    write_json(data, args.output)
    logger.info("Wrote %d %s to %s", len(data), args.kind, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
