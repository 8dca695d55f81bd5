import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from flask import Flask, current_app, redirect, render_template

from howmany import config
from howmany.data.get_data import Company, Dataset, load_dataset_files
from howmany.picker import random_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Value:
    """Everything the page template needs for one comparison."""

    company: Company
    population: int
    location: str
    times: float


def parse_request_path(path):
    """Split "Location/Company" on the first slash; None when there is none."""
    location, sep, company = path.partition("/")
    if not sep:
        return None
    return location, company


def create_app(dataset: Optional[Dataset] = None) -> Flask:
    app = Flask(__name__)
    # Loaded once; a broken data file stops the service before it serves anything
    app.config["DATASET"] = dataset if dataset is not None else load_dataset_files()

    @app.route('/')
    def index():
        path = random_path(current_app.config["DATASET"])
        return redirect(quote(path), code=302)

    @app.route('/<path:path>')
    def show(path):
        dataset = current_app.config["DATASET"]

        parts = parse_request_path(path)
        if parts is None:
            return "", 400
        location_segment, company_segment = parts

        company = dataset.company(company_segment)
        if company is None:
            logger.debug("Unknown company %r", company_segment)
            return "", 400

        location = dataset.population(location_segment)
        if location is None or location.population <= 0:
            logger.debug("Unknown location %r", location_segment)
            return "", 400

        value = Value(
            company=company,
            population=location.population,
            location=location_segment.replace("-", " "),
            times=company.employees / location.population,
        )
        return render_template('index.html', value=value)

    return app


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )
    app = create_app()
    print(f"Listening on http://0.0.0.0:{config.PORT}")
    logger.info("Serving %d companies", len(app.config["DATASET"].companies))
    app.run(host='0.0.0.0', port=int(config.PORT))


# Run the app
if __name__ == '__main__':
    main()
