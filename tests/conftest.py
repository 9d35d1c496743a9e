"""Shared test fixtures for complexity-report tests."""

import pytest

from complexity_report.models import (
    FunctionReport,
    HalsteadMetrics,
    ModuleReport,
    ProjectReport,
)


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def _make_function(
    name="f",
    cyclomatic=1,
    density=10.0,
    difficulty=1.0,
    volume=10.0,
    effort=10.0,
    line=1,
    sloc=10,
):
    """Create a FunctionReport with the metrics the thresholds consult."""
    return FunctionReport(
        name=name,
        line=line,
        cyclomatic=cyclomatic,
        cyclomatic_density=density,
        sloc=sloc,
        halstead=HalsteadMetrics(difficulty=difficulty, volume=volume, effort=effort),
    )


def _make_module(path="a.py", maintainability=100.0, functions=None, dependencies=None):
    return ModuleReport(
        path=path,
        maintainability=maintainability,
        functions=list(functions or []),
        dependencies=list(dependencies or []),
    )


def _make_result(reports=None, fod=0.0, cost=0.0, size=0.0):
    return ProjectReport(
        reports=list(reports or []),
        first_order_density=fod,
        change_cost=cost,
        core_size=size,
    )


# Source with one function of cyclomatic complexity 5 (four if/elif branches)
BRANCHY_SOURCE = '''\
def classify(x):
    if x < 0:
        return "negative"
    elif x == 0:
        return "zero"
    elif x < 10:
        return "small"
    elif x < 100:
        return "medium"
    return "large"
'''

SIMPLE_SOURCE = '''\
def add(a, b):
    return a + b
'''


@pytest.fixture
def sample_result():
    """Two modules, three functions, non-zero project metrics."""
    return _make_result(
        reports=[
            _make_module(
                "src/a.py",
                maintainability=120.5,
                functions=[
                    _make_function("alpha", cyclomatic=3, line=1),
                    _make_function("Beta.run", cyclomatic=7, line=12, effort=250.0),
                ],
                dependencies=["src/b.py"],
            ),
            _make_module("src/b.py", maintainability=90.0, functions=[_make_function("gamma")]),
        ],
        fod=25.0,
        cost=75.0,
        size=50.0,
    )


@pytest.fixture
def branchy_source():
    return BRANCHY_SOURCE


@pytest.fixture
def simple_source():
    return SIMPLE_SOURCE


@pytest.fixture
def source_tree(tmp_path):
    """A small project tree with a hidden directory and a non-Python file.

    tmp_path/
        pkg/__init__.py
        pkg/branchy.py
        pkg/simple.py
        .hidden/secret.py
        notes.txt
    """
    pkg = tmp_path / "pkg"
    pkg.mkdir()
    (pkg / "__init__.py").write_text("")
    (pkg / "branchy.py").write_text(BRANCHY_SOURCE)
    (pkg / "simple.py").write_text(SIMPLE_SOURCE)
    hidden = tmp_path / ".hidden"
    hidden.mkdir()
    (hidden / "secret.py").write_text(SIMPLE_SOURCE)
    (tmp_path / "notes.txt").write_text("not python\n")
    return tmp_path
