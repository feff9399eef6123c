import pytest

from JsonToDDL.database.dialects import Engine, get_dialect


@pytest.fixture
def sqlite():
    return get_dialect(Engine.SQLITE)


@pytest.fixture
def mysql():
    return get_dialect(Engine.MYSQL)


@pytest.fixture
def postgres():
    return get_dialect(Engine.POSTGRES)


@pytest.fixture
def shop_document():
    """A document exercising nested objects, arrays of objects and arrays of scalars."""
    return {
        "name": "Ana",
        "age": 30,
        "address": {
            "city": "Porto",
            "geo": {"lat": 41.1, "lng": -8.6},
        },
        "orders": [
            {"sku": "A1", "qty": 2, "notes": ["gift"]},
            {"sku": "B2", "qty": 1, "notes": ["x", "y"]},
        ],
        "tags": ["vip", "early"],
    }
