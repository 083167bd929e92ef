from unittest.mock import MagicMock

import pytest
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from ng_locators.locators.registry import NgBy


@pytest.fixture
def driver():
    """WebDriver stand-in recording execute_script calls."""
    mock = MagicMock(spec=WebDriver)
    mock.execute_script.return_value = []
    return mock


@pytest.fixture
def scope():
    return MagicMock(spec=WebElement)


@pytest.fixture
def by():
    return NgBy()
