"""
pytest integration.

Enable in a conftest.py:

    pytest_plugins = ["golden_files.pytest_plugin"]

Then:

    def test_person(golden):
        golden("person.golden.json", person, CompareOptions(marshal_input_as_json=True))

Run with --update-golden (or GOLDEN_UPDATE=1) to rewrite golden files.
"""

from pathlib import Path

import pytest

from golden_files.config import GoldenConfig, check_update_allowed, load_config
from golden_files.core.compare import GoldenComparer


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("golden", "golden file comparisons")
    group.addoption(
        "--update-golden",
        action="store_true",
        default=False,
        help="Rewrite golden files with the current actual output",
    )
    group.addoption(
        "--golden-config",
        default=None,
        type=Path,
        help="Path to golden.yaml (default: ./golden.yaml if present)",
    )


@pytest.fixture(scope="session")
def golden_config(request: pytest.FixtureRequest) -> GoldenConfig:
    """Settings from golden.yaml, environment and command line."""
    config = load_config(request.config.getoption("--golden-config"))
    if request.config.getoption("--update-golden"):
        config = config.with_update(True)
    check_update_allowed(config)
    return config


@pytest.fixture
def golden(request: pytest.FixtureRequest, golden_config: GoldenConfig) -> GoldenComparer:
    """Comparer resolving relative golden paths against the test module's directory."""
    base_dir = golden_config.base_dir or Path(request.node.path).parent
    return GoldenComparer(golden_config, base_dir=base_dir)
