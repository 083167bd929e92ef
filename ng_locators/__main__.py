import argparse
import logging
import sys
from typing import Any, Optional

from dotenv import load_dotenv

from ng_locators import NgBrowser
from ng_locators.config import SessionConfig
from ng_locators.locators.models import RepeaterLocator
from ng_locators.locators.registry import NgBy

logger = logging.getLogger(__name__)


def build_locator(
    by: NgBy,
    strategy: str,
    value: str,
    row: Optional[int] = None,
    column: Optional[str] = None,
) -> Any:
    """
    Resolve a strategy by name and apply repeater chaining.

    Raises:
        KeyError: If the strategy is not registered
        ValueError: If row/column is requested for a non-repeater locator
    """
    locator = by.resolve(strategy)(value)
    if row is None and column is None:
        return locator
    if not isinstance(locator, RepeaterLocator):
        raise ValueError(f"--row/--column only apply to repeater locators, not {strategy}")

    if row is not None:
        locator = locator.row(row)
        if column is not None:
            locator = locator.column(column)
    else:
        locator = locator.column(column)
    return locator


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ng_locators",
        description="Find elements on an AngularJS page with an Angular locator.",
    )
    parser.add_argument("url", help="page to open")
    parser.add_argument("strategy", help="locator strategy, e.g. binding, model, repeater")
    parser.add_argument("value", help="argument passed to the strategy")
    parser.add_argument("--row", type=int, help="repeater row index")
    parser.add_argument("--column", help="repeater column binding")
    parser.add_argument("--headed", action="store_true", help="show the browser window")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)

    try:
        locator = build_locator(NgBy(), args.strategy, args.value, args.row, args.column)
    except KeyError as e:
        logger.error(e.args[0])
        return 2
    except ValueError as e:
        logger.error(str(e))
        return 2

    config = SessionConfig.from_env()
    if args.headed:
        config.headless = False

    with NgBrowser(config) as browser:
        browser.navigate_to(args.url)
        elements = browser.all(locator)
        for element in elements:
            print(f"<{element.tag_name}> {element.text.strip()}")
        print(f"\nFound {len(elements)} element(s) using {locator.message}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
