import logging
import random
from typing import Any, Optional

from selenium import webdriver
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from webdriver_manager.chrome import ChromeDriverManager

logger = logging.getLogger(__name__)


def get_random_user_agent() -> str:
    user_agents = [
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
    ]
    return random.choice(user_agents)


def new_webdriver(headless: bool = True) -> WebDriver:
    options = Options()
    options.add_argument("--disable-extensions")
    options.add_argument(f"--user-agent={get_random_user_agent()}")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])

    if headless:
        options.add_argument("--headless")
        options.add_argument("--window-size=1900,1080")

    return webdriver.Chrome(service=Service(ChromeDriverManager().install()), options=options)


def describe_locator(locator: Any) -> str:
    """Human readable label for an Angular locator or a (by, value) pair."""
    message = getattr(locator, "message", None)
    if message is not None:
        return message
    if isinstance(locator, tuple) and len(locator) == 2:
        return f'By({locator[0]!r}, {locator[1]!r})'
    return repr(locator)


def find_elements(
    driver: WebDriver, locator: Any, using: Optional[WebElement] = None
) -> list[WebElement]:
    """
    Find all elements matching a locator.

    Args:
        driver: WebDriver to search with
        locator: Angular locator, or a Selenium ``(by, value)`` pair
        using: Element scoping the search, None for the whole page

    Returns:
        list[WebElement]: Matching elements, possibly empty

    Raises:
        TypeError: If locator is neither form
    """
    override = getattr(locator, "find_elements_override", None)
    if override is not None:
        logger.debug(f"Finding elements {describe_locator(locator)}")
        return override(driver, using)

    if isinstance(locator, tuple) and len(locator) == 2:
        by, value = locator
        return (using or driver).find_elements(by, value)

    raise TypeError(f"Unsupported locator: {locator!r}")


def find_element(
    driver: WebDriver, locator: Any, using: Optional[WebElement] = None
) -> WebElement:
    """
    Find the first element matching a locator.

    Raises:
        NoSuchElementException: If nothing matches
    """
    elements = find_elements(driver, locator, using)
    if not elements:
        raise NoSuchElementException(
            f"No element found using locator: {describe_locator(locator)}"
        )
    if len(elements) > 1:
        logger.warning(
            f"More than one element found for locator {describe_locator(locator)}, "
            "the first result will be used"
        )
    return elements[0]
