"""
Config test fixtures.
"""

import os
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def clean_environment():
    """
    Run each test without NOTEGENIUS_* variables.

    load_dotenv writes straight into os.environ, so the whole environment is
    restored afterwards rather than individual keys.
    """
    with patch.dict(os.environ):
        for key in [key for key in os.environ if key.startswith("NOTEGENIUS_")]:
            del os.environ[key]
        yield
