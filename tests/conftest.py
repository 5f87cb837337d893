from pathlib import Path

import pytest

from mvc_api_docs.config import DocumentationConfiguration
from mvc_api_docs.source import load_source

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def petstore():
    return load_source(FIXTURES / "petstore.py")


@pytest.fixture
def configuration():
    return DocumentationConfiguration(api_version="2.0", swagger_version="1.1", base_path="http://localhost:8080/api")
