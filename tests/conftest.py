"""Shared fixtures for name matching tests."""

import pytest


@pytest.fixture
def names_source1():
    """Names as written in the first source."""
    return [
        "Beyoncé Knowles",
        "Frédéric François Chopin",
        "Kendrick Lamar Duckworth",
        "Calvin Cordozar Broadus Jr.",
        "Céline Marie Claudette Dion",
        "Aubrey Drake Graham",
    ]


@pytest.fixture
def names_source2():
    """The same people as written in the second source."""
    return [
        "Beyonce Knowles-Carter",
        "CHOPIN, Fryderyk F.",
        "LAMAR, Kendrik",
        "Snoop Dogg",
        "DION, Céline",
        "Drake",
    ]
