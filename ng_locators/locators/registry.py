import logging
import warnings
from typing import Any, Callable

from selenium.webdriver.common.by import By

from ng_locators.dom.js_scripts import (FIND_BINDINGS_SCRIPT,
                                        FIND_BY_BUTTON_TEXT_SCRIPT,
                                        FIND_BY_MODEL_SCRIPT,
                                        FIND_BY_PARTIAL_BUTTON_TEXT_SCRIPT,
                                        FIND_INPUTS_SCRIPT,
                                        FIND_SELECTED_OPTIONS_SCRIPT,
                                        FIND_SELECTS_SCRIPT,
                                        FIND_TEXTAREAS_SCRIPT)
from ng_locators.locators.models import RepeaterLocator, ScriptLocator

logger = logging.getLogger(__name__)

LocatorFactory = Callable[..., Any]


def _script_factory(name: str, script: str) -> LocatorFactory:
    """Build a factory passing its call arguments to ``script``."""
    def factory(*args: Any) -> ScriptLocator:
        return ScriptLocator(name=name, script=script, args=args)
    factory.__name__ = name
    return factory


def _descriptor_factory(name: str, script: str, replacement: str = "") -> LocatorFactory:
    """Build a single-argument factory, warning on use when it is deprecated."""
    def factory(descriptor: str) -> ScriptLocator:
        if replacement:
            warnings.warn(
                f"by.{name} is deprecated, use by.{replacement} instead",
                DeprecationWarning,
                stacklevel=2,
            )
        return ScriptLocator(name=name, script=script, args=(descriptor,))
    factory.__name__ = name
    return factory


def _repeater(descriptor: str) -> RepeaterLocator:
    return RepeaterLocator(descriptor)


class NgBy:
    """
    Angular aware locator strategies on top of Selenium's ``By``.

    Registered strategies are reachable as attributes and are looked up at
    call time, so registering under an existing name replaces it::

        by = NgBy()
        by.binding("{{status}}")
        by.repeater("cat in pets").row(0).column("{{cat.name}}")
        by.CSS_SELECTOR                          # Selenium's "css selector"

    Registration is not synchronised; configure the registry before sharing
    it between threads.
    """

    def __init__(self, base: type = By) -> None:
        self._base = base
        self._strategies: dict[str, LocatorFactory] = {}
        self._register_builtins()

    def _register_builtins(self) -> None:
        self._install("binding", _descriptor_factory("binding", FIND_BINDINGS_SCRIPT))
        self._install("model", _descriptor_factory("model", FIND_BY_MODEL_SCRIPT))
        self._install("select", _descriptor_factory("select", FIND_SELECTS_SCRIPT, "model"))
        self._install("input", _descriptor_factory("input", FIND_INPUTS_SCRIPT, "model"))
        self._install("textarea", _descriptor_factory("textarea", FIND_TEXTAREAS_SCRIPT, "model"))
        self._install("repeater", _repeater)

        camel_case = {
            "selected_option": _descriptor_factory("selectedOption", FIND_SELECTED_OPTIONS_SCRIPT),
            "button_text": _descriptor_factory("buttonText", FIND_BY_BUTTON_TEXT_SCRIPT),
            "partial_button_text": _descriptor_factory(
                "partialButtonText", FIND_BY_PARTIAL_BUTTON_TEXT_SCRIPT
            ),
        }
        for name, factory in camel_case.items():
            self._install(name, factory)
            self._install(factory.__name__, factory)

    def _install(self, name: str, factory: LocatorFactory) -> None:
        if name in self._strategies:
            logger.debug(f"Replacing locator strategy: {name}")
        self._strategies[name] = factory

    def register(self, name: str, factory: LocatorFactory) -> None:
        """Install ``factory`` under ``name``, replacing any existing entry."""
        self._install(name, factory)

    def register_strategy(self, name: str, script: str) -> None:
        """
        Add a script-backed locator usable as ``by.<name>(*args)``.

        Args:
            name: Strategy name, an existing one is silently replaced
            script: Browser script receiving the locator arguments followed
                by the scoping element, returning an array of elements
        """
        logger.debug(f"Registering locator strategy: {name}")
        self._install(name, _script_factory(name, script))

    def resolve(self, name: str) -> LocatorFactory:
        """
        Return the factory registered under ``name``.

        Raises:
            KeyError: If no strategy has that name
        """
        try:
            return self._strategies[name]
        except KeyError:
            raise KeyError(f"Unknown locator strategy: {name}") from None

    def names(self) -> list[str]:
        return sorted(self._strategies)

    def __contains__(self, name: object) -> bool:
        return name in self._strategies

    def __getattribute__(self, name: str) -> Any:
        # Registered strategies shadow the registry's own public methods.
        if not name.startswith("_"):
            try:
                strategies = object.__getattribute__(self, "_strategies")
            except AttributeError:
                strategies = {}
            if name in strategies:
                return strategies[name]
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are neither strategies nor attributes.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return getattr(self._base, name)
        except AttributeError:
            raise AttributeError(
                f"{type(self).__name__!r} has no locator strategy {name!r}"
            ) from None
