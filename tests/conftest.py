"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog, settings and in-process application fixtures.

==============================================================================
"""

import io
from typing import Callable, List, NamedTuple

import pytest

from product_lookup.catalog import Product, ProductCatalog
from product_lookup.config import Settings, get_settings
from product_lookup.main import Application


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> ProductCatalog:
    """Create an empty catalog."""
    return ProductCatalog()


@pytest.fixture
def stocked_catalog() -> ProductCatalog:
    """Catalog with a few records, including a repeated name."""
    catalog = ProductCatalog()
    catalog.append(Product(name="Apple", weight=0.2, unit="kg"))
    catalog.append(Product(name="Banana", weight=1.5, unit="lb"))
    catalog.append(Product(name="APPLE", weight=3, unit="ea"))
    catalog.append(Product(name="Éclair", weight=0.1, unit="kg"))
    return catalog


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no .env file)."""
    return Settings(_env_file=None)


@pytest.fixture
def clear_settings_cache():
    """Reset the cached Settings instance around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

class RunResult(NamedTuple):
    exit_code: int
    stdout: str
    stderr: str


@pytest.fixture
def run_app(settings: Settings) -> Callable[[List[str]], RunResult]:
    """Run the application in-process with the given input lines."""
    def _run(lines: List[str]) -> RunResult:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        stderr = io.StringIO()
        exit_code = Application(stdin, stdout, stderr, settings=settings).run()
        return RunResult(exit_code, stdout.getvalue(), stderr.getvalue())

    return _run
