"""Shared pytest configuration and fixtures for facetpivot tests."""

import pytest


def _make_row(name, column=None, y=0, label="GB", color=None):
    """Build a raw row in the host's wire shape."""
    groups = [{"type": "function", "displayName": label}, {"value": name}]
    if column is not None:
        groups.append({"value": column})
    row = {"groups": groups, "series": [{"y": y}]}
    if color is not None:
        row["color"] = color
    return row


@pytest.fixture
def make_row():
    return _make_row


@pytest.fixture
def region_rows() -> list:
    return [
        _make_row("Jan", "US", 10),
        _make_row("Jan", "EU", 30),
    ]


@pytest.fixture
def monthly_rows() -> list:
    return [
        _make_row("Jan", "US", 10, label="Sales"),
        _make_row("Feb", "US", 20, label="Sales"),
        _make_row("Feb", "EU", 5, label="Sales"),
        _make_row("Mar", "EU", 15, label="Sales"),
    ]


@pytest.fixture
def dated_rows() -> list:
    return [
        _make_row("2024-03", "US", 2),
        _make_row("2024-01", "US", 1),
        _make_row("2024-02", "EU", 4),
    ]


@pytest.fixture
def app_rows() -> list:
    return [
        _make_row("checkout", y=120),
        _make_row("search", y=300),
        _make_row("login", y=45),
        _make_row("cart", y=120),
    ]


@pytest.fixture
def engine_rows() -> list:
    """Rows in the query-engine shape (metadata + data)."""
    return [
        {
            "metadata": {
                "groups": [
                    {"type": "function", "displayName": "Average duration"},
                    {"type": "facet", "value": "Chrome"},
                    {"type": "facet", "value": "March 2024"},
                ],
                "color": "#000000",
            },
            "data": [{"x": 0, "y": 1.5}],
        },
        {
            "metadata": {
                "groups": [
                    {"type": "function", "displayName": "Average duration"},
                    {"type": "facet", "value": "Firefox"},
                    {"type": "facet", "value": "February 2024"},
                ],
                "color": "#ffffff",
            },
            "data": [{"x": 0, "y": 2.5}],
        },
    ]
