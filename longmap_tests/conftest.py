import os
from unittest.mock import patch, MagicMock

import pytest

os.environ['TESTING'] = 'true'

from longmap.long_map import LongMap


@pytest.fixture
def long_map():
    return LongMap()


@pytest.fixture
def single_bucket_map():
    return LongMap(1)


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('longmap.logger.logger.logger') as mock_logger:
        mock_logger.isEnabledFor.return_value = True
        mock_logger.debug = MagicMock()
        mock_logger.error = MagicMock()
        yield mock_logger


@pytest.fixture
def sample_entries():
    return {
        0: "a",
        -90: "b",
        999999999: "c",
    }
