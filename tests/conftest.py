"""
Shared pytest fixtures for test suite.

Provides catalog data, catalog files on disk and scripted console answers
used across the test modules.
"""

import json
import pytest

from madlibs.models import StoryCatalog


def write_catalog(path, data):
    """Write catalog data as JSON and return the path."""
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class ScriptedAnswers:
    """
    Callable standing in for the console: returns canned replies per token
    and records every token it was asked for.
    """

    def __init__(self, answers):
        self.answers = dict(answers)
        self.asked = []

    def __call__(self, placeholder):
        self.asked.append(placeholder)
        return self.answers[placeholder]


# Catalog data fixtures
@pytest.fixture
def sample_catalog_data():
    """Catalog with a single adventure template and several others."""
    return {
        "adventure": ["A hero named <name> climbed <mountain>."],
        "romcom": [
            "<name> met <name2> at <place>.",
            "<name> dropped a <noun> on <name2>.",
        ],
        "family": ["The family visited <place> and ate <food>."],
        "fantasy": [
            "The wizard <name> turned a <noun> into a <animal>.",
            "A dragon named <name> guarded <place>.",
            "No blanks in this one.",
        ],
    }


@pytest.fixture
def sample_catalog(sample_catalog_data):
    """Validated StoryCatalog built from sample_catalog_data."""
    return StoryCatalog.model_validate(sample_catalog_data)


@pytest.fixture
def catalog_file(tmp_path, sample_catalog_data):
    """Path to a valid catalog JSON file."""
    return write_catalog(tmp_path / "stories.json", sample_catalog_data)


@pytest.fixture
def scripted_answers():
    """Factory for ScriptedAnswers instances."""
    return ScriptedAnswers
