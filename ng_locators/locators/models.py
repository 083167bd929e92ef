from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Union

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from ng_locators.dom.js_scripts import (FIND_ALL_REPEATER_ROWS_SCRIPT,
                                        FIND_REPEATER_COLUMN_SCRIPT,
                                        FIND_REPEATER_ELEMENT_SCRIPT,
                                        FIND_REPEATER_ROWS_SCRIPT)


def js_string(value: Any, in_array: bool = False) -> str:
    """Render a value the way JavaScript string concatenation does."""
    if value is None:
        return "" if in_array else "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(js_string(item, in_array=True) for item in value)
    return str(value)


class _Locator(ABC):
    """Shared behaviour of every Angular locator descriptor."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Label identifying the locator in diagnostics."""

    def find_elements_override(
        self, driver: WebDriver, using: Optional[WebElement] = None
    ) -> list[WebElement]:
        """
        Evaluate this locator's search script in the browser.

        Args:
            driver: WebDriver the script is executed with
            using: Element scoping the search, None for the whole document

        Returns:
            list[WebElement]: Matching elements, possibly empty
        """
        script, args = script_call(self)
        return driver.execute_script(script, *args, using) or []

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ScriptLocator(_Locator):
    """Locator backed by a single search script, built-in or registered."""
    name: str
    script: str
    args: tuple[Any, ...] = ()

    @property
    def message(self) -> str:
        return f'by.{self.name}("{",".join(js_string(arg) for arg in self.args)}")'


@dataclass(frozen=True)
class RepeaterCellLocator(_Locator):
    """The element bound to ``binding`` in row ``index`` of a repeater."""
    descriptor: str
    index: int
    binding: str
    row_first: bool = True

    @property
    def message(self) -> str:
        root = f'by.repeater("{self.descriptor}")'
        if self.row_first:
            return f'{root}.row("{self.index}").column("{self.binding}")'
        return f'{root}.column("{self.binding}").row("{self.index}")'


@dataclass(frozen=True)
class RepeaterRowLocator(_Locator):
    """A single row of a repeater."""
    descriptor: str
    index: int

    @property
    def message(self) -> str:
        return f'by.repeater("{self.descriptor}").row("{self.index}")'

    def column(self, binding: str) -> RepeaterCellLocator:
        return RepeaterCellLocator(self.descriptor, self.index, binding, row_first=True)


@dataclass(frozen=True)
class RepeaterColumnLocator(_Locator):
    """Elements bound to ``binding`` across every row of a repeater."""
    descriptor: str
    binding: str

    @property
    def message(self) -> str:
        return f'by.repeater("{self.descriptor}").column("{self.binding}")'

    def row(self, index: int) -> RepeaterCellLocator:
        return RepeaterCellLocator(self.descriptor, index, self.binding, row_first=False)


@dataclass(frozen=True)
class RepeaterLocator(_Locator):
    """
    All rows of the repeater whose expression contains ``descriptor``.

    Usage:
        <div ng-repeat="cat in pets">
          <span>{{cat.name}}</span>
          <span>{{cat.age}}</span>
        </div>

        by.repeater("cat in pets").row(1)                       # second row
        by.repeater("cat in pets").row(0).column("{{cat.name}}")  # one span
        by.repeater("cat in pets").column("{{cat.age}}")        # every age
    """
    descriptor: str

    @property
    def message(self) -> str:
        return f'by.repeater("{self.descriptor}")'

    def row(self, index: int) -> RepeaterRowLocator:
        return RepeaterRowLocator(self.descriptor, index)

    def column(self, binding: str) -> RepeaterColumnLocator:
        return RepeaterColumnLocator(self.descriptor, binding)


AngularLocator = Union[
    ScriptLocator,
    RepeaterLocator,
    RepeaterRowLocator,
    RepeaterColumnLocator,
    RepeaterCellLocator,
]


def script_call(locator: AngularLocator) -> tuple[str, list[Any]]:
    """
    Map a locator to the script and arguments it evaluates.

    The scoping element is not included; it is always appended last when the
    script runs.

    Raises:
        TypeError: If locator is not an Angular locator
    """
    if isinstance(locator, ScriptLocator):
        return locator.script, list(locator.args)
    if isinstance(locator, RepeaterLocator):
        return FIND_ALL_REPEATER_ROWS_SCRIPT, [locator.descriptor]
    if isinstance(locator, RepeaterRowLocator):
        return FIND_REPEATER_ROWS_SCRIPT, [locator.descriptor, locator.index]
    if isinstance(locator, RepeaterColumnLocator):
        return FIND_REPEATER_COLUMN_SCRIPT, [locator.descriptor, locator.binding]
    if isinstance(locator, RepeaterCellLocator):
        return FIND_REPEATER_ELEMENT_SCRIPT, [locator.descriptor, locator.index, locator.binding]
    raise TypeError(f"Not an Angular locator: {locator!r}")
