import json

import pytest

from howmany.app import create_app
from howmany.data.get_data import load_dataset

COMPANIES = [
    {"Rank": 4, "Name": "Accenture", "Symbol": "ACN", "Employees": 733000, "Price": 307.18, "Country": "Ireland"},
    {"Rank": 3, "Name": "Foxconn (Hon Hai Precision Industry)", "Symbol": "2317.TW", "Employees": 767062, "Price": 3.21, "Country": "Taiwan"},
    {"Rank": 19, "Name": "AT&T", "Symbol": "T", "Employees": 160700, "Price": 15.02, "Country": "United States"},
    {"Rank": 20, "Name": "Johnson & Johnson", "Symbol": "JNJ", "Employees": 152700, "Price": 161.43, "Country": "United States"},
    {"Rank": 25, "Name": "Coca-Cola", "Symbol": "KO", "Employees": 82500, "Price": 58.12, "Country": "United States"},
    {"Rank": 99, "Name": "Tiny Shop", "Symbol": "", "Employees": 12, "Price": 0, "Country": "Sweden"},
]

POPULATIONS = {
    "Gotland": 58000,
    "Sweden": 10551707,
    "Visby": 23600,
    "Upplands-Bro": 30498,
    "Nowhere": 0,
}


@pytest.fixture
def companies_json():
    return json.dumps(COMPANIES).encode("utf-8")


@pytest.fixture
def populations_json():
    return json.dumps(POPULATIONS).encode("utf-8")


@pytest.fixture
def dataset(companies_json, populations_json):
    return load_dataset(companies_json, populations_json)


@pytest.fixture
def app(dataset):
    app = create_app(dataset)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
