from unittest.mock import Mock

import pytest

from form_config import FormConfig


@pytest.fixture
def logger():
    return Mock()


@pytest.fixture
def config(logger):
    return FormConfig(logger=logger)
