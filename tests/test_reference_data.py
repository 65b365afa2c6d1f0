import math

import pytest

import practicehealth.data as data
from practicehealth.core.enums import Category
from practicehealth.core.errors import ReferenceDataError


def test_shipped_tables_are_valid():
    data.validate_reference_data()


def test_weights_sum_to_one():
    assert math.isclose(sum(data.CATEGORY_WEIGHTS.values()), 1.0)
    assert set(data.CATEGORY_WEIGHTS) == set(Category)


def test_every_category_has_topics():
    assert all(data.CATEGORY_TOPICS[c] for c in Category)


def test_unbalanced_weights_rejected(monkeypatch):
    weights = dict(data.CATEGORY_WEIGHTS)
    weights[Category.FINANCIAL] = 0.5
    monkeypatch.setattr(data, "CATEGORY_WEIGHTS", weights)

    with pytest.raises(ReferenceDataError, match="sum to 1.0"):
        data.validate_reference_data()


def test_missing_category_rejected(monkeypatch):
    weights = dict(data.CATEGORY_WEIGHTS)
    del weights[Category.AUTOMATION]
    monkeypatch.setattr(data, "CATEGORY_WEIGHTS", weights)

    with pytest.raises(ReferenceDataError, match="AUTOMATION"):
        data.validate_reference_data()


def test_self_connection_rejected(monkeypatch):
    connections = {k: dict(v) for k, v in data.BASE_CONNECTIONS.items()}
    connections[Category.FINANCIAL][Category.FINANCIAL] = 0.5
    monkeypatch.setattr(data, "BASE_CONNECTIONS", connections)

    with pytest.raises(ReferenceDataError, match="Self-connection"):
        data.validate_reference_data()
