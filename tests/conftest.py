import pytest

from themeday.core.resolver import ThemeResolver
from themeday.core.rules import ThemeRulesConfig


def _build_catalog(include_everyday: bool = True) -> ThemeRulesConfig:
    """Small catalog covering every rule kind and both availability paths."""
    data = {
        "seasonal": [
            {"name": "winter", "rule": {"kind": "range", "from": "12-21", "to": "03-19"}},
            {"name": "holiday-season", "rule": {"kind": "range", "from": "12-26", "to": "01-07"}},
            {"name": "summer", "rule": {"kind": "range", "from": "06-21", "to": "09-21"}},
        ],
        "holidays": [
            {"name": "new-years-day", "rule": {"kind": "range", "from": "01-01", "to": "01-01"}},
            {"name": "easter", "rule": {"kind": "holiday-offset", "holiday": "easter", "start": -2, "end": 0}},
            {"name": "passover", "rule": {"kind": "holiday-offset", "holiday": "passover", "start": -1, "end": 1}},
            {"name": "thanksgiving", "rule": {"kind": "nth-weekday", "month": 11, "weekday": 4, "n": 4, "duration": 1}},
        ],
        "cultural": [
            {
                "name": "diwali",
                "rule": {"kind": "range", "from": "10-18", "to": "10-22"},
                "enabled": False,
                "region": ["india", "nepal"],
                "metadata": {"actualDate": "2025-10-20", "description": "Festival of lights"},
            },
            {"name": "lantern-festival", "rule": {"kind": "range", "from": "10-20", "to": "10-20"}, "enabled": False},
        ],
        "everyday": [],
    }
    if include_everyday:
        data["everyday"] = [{"name": "everyday", "rule": {"kind": "always"}}]
    return ThemeRulesConfig.model_validate(data)


@pytest.fixture
def build_catalog():
    return _build_catalog


@pytest.fixture
def catalog():
    return _build_catalog()


@pytest.fixture
def resolver(catalog):
    return ThemeResolver(catalog)
