import logging
import time
from typing import Any, Optional

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import WebDriverWait

from ng_locators.config import SessionConfig
from ng_locators.driver import find_element, find_elements, new_webdriver
from ng_locators.locators.models import (AngularLocator, RepeaterCellLocator,
                                         RepeaterColumnLocator,
                                         RepeaterLocator, RepeaterRowLocator,
                                         ScriptLocator, script_call)
from ng_locators.locators.registry import NgBy

logger = logging.getLogger(__name__)

__all__ = [
    "AngularLocator",
    "NgBrowser",
    "NgBy",
    "RepeaterCellLocator",
    "RepeaterColumnLocator",
    "RepeaterLocator",
    "RepeaterRowLocator",
    "ScriptLocator",
    "SessionConfig",
    "find_element",
    "find_elements",
    "script_call",
]


class NgBrowser:
    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        driver: Optional[WebDriver] = None,
    ) -> None:
        """
        Initialize a browser session with its own locator registry.

        Args:
            config: Session configuration, defaults to SessionConfig()
            driver: Existing WebDriver to use instead of starting Chrome
        """
        self.config: SessionConfig = config or SessionConfig()
        self.by: NgBy = NgBy()
        self.driver: Optional[WebDriver] = driver

        if self.driver is None:
            self._setup_driver()

    def __enter__(self):
        """Support for context manager protocol."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Ensure browser is closed when exiting context."""
        self.close()

    def all(self, locator: Any, using: Optional[WebElement] = None) -> list[WebElement]:
        """Find every element matching an Angular locator or (by, value) pair."""
        return find_elements(self._require_driver(), locator, using)

    def close(self) -> None:
        """Close the browser and clean up resources."""
        if self.driver:
            self.driver.quit()
            self.driver = None

    def element(self, locator: Any, using: Optional[WebElement] = None) -> WebElement:
        """
        Find the first element matching a locator.

        Raises:
            NoSuchElementException: If nothing matches
        """
        return find_element(self._require_driver(), locator, using)

    def navigate_to(self, url: str) -> None:
        """
        Load a URL and wait for the document to finish loading.

        Raises:
            TimeoutException: If the page does not load within
                config.page_load_timeout seconds
        """
        driver = self._require_driver()
        logger.info(f"Navigating to {url}")
        driver.get(url)
        self._wait_for_page_load()

    def _require_driver(self) -> WebDriver:
        if self.driver is None:
            raise RuntimeError("Browser session is closed")
        return self.driver

    def _setup_driver(self):
        """Initialize the web driver."""
        self.driver = new_webdriver(self.config.headless)

    def _wait_for_page_load(self):
        """Wait for the page to fully load."""
        if self.config.parse_delay:
            logger.info(f"Waiting {self.config.parse_delay}s for page to settle...")
            time.sleep(self.config.parse_delay)
        WebDriverWait(self.driver, self.config.page_load_timeout).until(
            lambda d: d.execute_script("return document.readyState")
            == "complete"
        )
