"""Shared fixtures for the CleanSlate test suite."""

from pathlib import Path

import pytest

from cleanslate.context import AnalysisSettings
from cleanslate.finder import scan_source
from cleanslate.utils import create_javascript_parser

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def parser():
    return create_javascript_parser()


@pytest.fixture
def scan(parser):
    """Analyze a JavaScript snippet and return its issues."""

    def _scan(source: str, settings: AnalysisSettings = None, file_path: str = "/project/sample.js"):
        return scan_source(source.encode("utf-8"), file_path, parser, settings)

    return _scan


@pytest.fixture
def sample_path() -> Path:
    return FIXTURES / "sample.js"
