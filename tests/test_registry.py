import warnings

import pytest
from selenium.common.exceptions import JavascriptException
from selenium.webdriver.common.by import By

from ng_locators.dom import js_scripts
from ng_locators.locators.models import ScriptLocator
from ng_locators.locators.registry import NgBy

BUILTINS = [
    ("binding", "binding", js_scripts.FIND_BINDINGS_SCRIPT),
    ("model", "model", js_scripts.FIND_BY_MODEL_SCRIPT),
    ("select", "select", js_scripts.FIND_SELECTS_SCRIPT),
    ("selected_option", "selectedOption", js_scripts.FIND_SELECTED_OPTIONS_SCRIPT),
    ("selectedOption", "selectedOption", js_scripts.FIND_SELECTED_OPTIONS_SCRIPT),
    ("input", "input", js_scripts.FIND_INPUTS_SCRIPT),
    ("button_text", "buttonText", js_scripts.FIND_BY_BUTTON_TEXT_SCRIPT),
    ("buttonText", "buttonText", js_scripts.FIND_BY_BUTTON_TEXT_SCRIPT),
    ("partial_button_text", "partialButtonText", js_scripts.FIND_BY_PARTIAL_BUTTON_TEXT_SCRIPT),
    ("partialButtonText", "partialButtonText", js_scripts.FIND_BY_PARTIAL_BUTTON_TEXT_SCRIPT),
    ("textarea", "textarea", js_scripts.FIND_TEXTAREAS_SCRIPT),
]


@pytest.mark.filterwarnings("ignore::DeprecationWarning")
@pytest.mark.parametrize("attr, label, script", BUILTINS)
def test_builtin_label_and_delegation(by, driver, scope, attr, label, script):
    locator = getattr(by, attr)("user.name")

    assert locator.message == f'by.{label}("user.name")'

    locator.find_elements_override(driver, scope)
    driver.execute_script.assert_called_once_with(script, "user.name", scope)


def test_binding_example(by, driver, scope):
    element = object()
    driver.execute_script.return_value = [element]

    locator = by.binding("{{status}}")

    assert locator.message == 'by.binding("{{status}}")'
    assert str(locator) == 'by.binding("{{status}}")'
    assert locator.find_elements_override(driver, scope) == [element]
    driver.execute_script.assert_called_once_with(
        js_scripts.FIND_BINDINGS_SCRIPT, "{{status}}", scope
    )


def test_unscoped_search_passes_none(by, driver):
    by.model("user").find_elements_override(driver, None)

    driver.execute_script.assert_called_once_with(js_scripts.FIND_BY_MODEL_SCRIPT, "user", None)


def test_script_returning_nothing_gives_empty_list(by, driver, scope):
    driver.execute_script.return_value = None

    assert by.model("user").find_elements_override(driver, scope) == []


def test_driver_errors_propagate(by, driver, scope):
    driver.execute_script.side_effect = JavascriptException("angular is not defined")

    with pytest.raises(JavascriptException):
        by.binding("{{status}}").find_elements_override(driver, scope)


@pytest.mark.parametrize("name", ["select", "input", "textarea"])
def test_deprecated_aliases_warn(by, name):
    with pytest.warns(DeprecationWarning, match="by.model"):
        getattr(by, name)("user")


def test_model_does_not_warn(by):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        by.model("user")


def test_register_strategy(by, driver, scope):
    script = "return [arguments[0]];"
    by.register_strategy("custom", script)

    locator = by.custom("x")

    assert isinstance(locator, ScriptLocator)
    assert locator.message == 'by.custom("x")'
    locator.find_elements_override(driver, scope)
    driver.execute_script.assert_called_once_with(script, "x", scope)


def test_register_strategy_passes_every_argument(by, driver, scope):
    by.register_strategy("cell", "return [];")

    locator = by.cell("table", 3)

    assert locator.message == 'by.cell("table,3")'
    locator.find_elements_override(driver, scope)
    driver.execute_script.assert_called_once_with("return [];", "table", 3, scope)


def test_register_strategy_replaces_builtin(by, driver, scope):
    by.register_strategy("binding", "return [];")

    locator = by.binding("{{status}}")
    locator.find_elements_override(driver, scope)

    driver.execute_script.assert_called_once_with("return [];", "{{status}}", scope)
    assert by.resolve("binding")("a").script == "return [];"


def test_register_arbitrary_factory(by):
    factory = lambda value: ("css selector", f"[data-test={value}]")
    by.register("data_test", factory)

    assert by.resolve("data_test") is factory
    assert by.data_test("save") == ("css selector", "[data-test=save]")
    assert "data_test" in by


def test_registries_are_independent(by):
    by.register_strategy("custom", "return [];")

    assert "custom" not in NgBy()


def test_resolve_unknown_strategy(by):
    with pytest.raises(KeyError, match="Unknown locator strategy: nope"):
        by.resolve("nope")


def test_unknown_attribute(by):
    with pytest.raises(AttributeError):
        by.nope


def test_selenium_strategies_available(by):
    assert by.CSS_SELECTOR == By.CSS_SELECTOR
    assert by.ID == "id"
    assert by.XPATH == "xpath"


def test_builtin_names(by):
    assert set(by.names()) >= {
        "binding", "model", "select", "selected_option", "input",
        "button_text", "partial_button_text", "textarea", "repeater",
    }


@pytest.mark.parametrize("name", ["names", "resolve", "register", "register_strategy"])
def test_strategy_shadows_registry_method(by, driver, scope, name):
    by.register_strategy(name, "return [];")

    locator = getattr(by, name)("x")

    assert locator.message == f'by.{name}("x")'
    locator.find_elements_override(driver, scope)
    driver.execute_script.assert_called_once_with("return [];", "x", scope)
    assert NgBy.resolve(by, name) is getattr(by, name)


def test_label_renders_values_like_javascript(by):
    by.register_strategy("flag", "return [];")

    assert by.flag(None).message == 'by.flag("null")'
    assert by.flag(True).message == 'by.flag("true")'
    assert by.flag(False).message == 'by.flag("false")'
    assert by.flag(["a", "b"]).message == 'by.flag("a,b")'
    assert by.flag(["a", None, 2.0]).message == 'by.flag("a,,2")'
    assert by.flag(3).message == 'by.flag("3")'
