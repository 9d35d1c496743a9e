"""Tests for function, module and project threshold evaluation."""

import pytest

from complexity_report.config import ReportConfig
from complexity_report.models import FunctionReport, HalsteadMetrics, ModuleReport, ProjectReport
from complexity_report.thresholds import (
    MODULE_BREACH_MESSAGE,
    PROJECT_BREACH_MESSAGE,
    evaluate,
    failing_modules,
    is_project_too_complex,
    is_threshold_breached,
)


def _function(cyclomatic=1, density=10.0, difficulty=1.0, volume=10.0, effort=10.0):
    return FunctionReport(
        name="f",
        line=1,
        cyclomatic=cyclomatic,
        cyclomatic_density=density,
        sloc=5,
        halstead=HalsteadMetrics(difficulty=difficulty, volume=volume, effort=effort),
    )


def _module(path="a.py", maintainability=100.0, functions=()):
    return ModuleReport(path=path, maintainability=maintainability, functions=list(functions))


def _result(reports=(), fod=0.0, cost=0.0, size=0.0):
    return ProjectReport(
        reports=list(reports), first_order_density=fod, change_cost=cost, core_size=size
    )


class TestIsThresholdBreached:
    def test_unset_threshold_never_breaches(self):
        assert is_threshold_breached(None, 1e9) is False
        assert is_threshold_breached(None, -1e9, inverse=True) is False

    def test_zero_threshold_is_a_real_threshold(self):
        assert is_threshold_breached(0, 1) is True
        assert is_threshold_breached(0, 0) is False

    def test_greater_than_breaches(self):
        assert is_threshold_breached(10, 11) is True
        assert is_threshold_breached(10, 10) is False
        assert is_threshold_breached(10, 9) is False

    def test_inverse_less_than_breaches(self):
        assert is_threshold_breached(70, 69.9, inverse=True) is True
        assert is_threshold_breached(70, 70, inverse=True) is False
        assert is_threshold_breached(70, 71, inverse=True) is False


class TestFunctionThresholds:
    def test_cyclomatic_equal_does_not_breach(self):
        config = ReportConfig(maxcyc=10)
        result = _result([_module(functions=[_function(cyclomatic=10)])])
        assert not evaluate(result, config).breached

    def test_cyclomatic_above_breaches(self):
        config = ReportConfig(maxcyc=10)
        result = _result([_module(functions=[_function(cyclomatic=11)])])
        assert evaluate(result, config).failing_modules == ["a.py"]

    @pytest.mark.parametrize(
        "option, kwargs",
        [
            ("maxcycden", {"density": 51.0}),
            ("maxhd", {"difficulty": 51.0}),
            ("maxhv", {"volume": 51.0}),
            ("maxhe", {"effort": 51.0}),
        ],
    )
    def test_each_function_metric(self, option, kwargs):
        config = ReportConfig(**{option: 50})
        breaching = _result([_module(functions=[_function(**kwargs)])])
        assert failing_modules(breaching.reports, config) == ["a.py"]

    def test_any_function_fails_the_module(self):
        config = ReportConfig(maxcyc=3)
        module = _module(functions=[_function(1), _function(2), _function(4)])
        assert failing_modules([module], config) == ["a.py"]


class TestModuleThresholds:
    def test_maintainability_equal_does_not_breach(self):
        config = ReportConfig(minmi=70)
        assert failing_modules([_module(maintainability=70)], config) == []

    def test_maintainability_below_breaches(self):
        config = ReportConfig(minmi=70)
        assert failing_modules([_module(maintainability=69.9)], config) == ["a.py"]


class TestFailureSet:
    def test_module_listed_once_for_multiple_breaches(self):
        config = ReportConfig(maxcyc=1, maxhe=1, minmi=200)
        module = _module(
            maintainability=10,
            functions=[_function(cyclomatic=5, effort=100), _function(cyclomatic=9)],
        )
        assert failing_modules([module], config) == ["a.py"]

    def test_duplicate_paths_listed_once(self):
        config = ReportConfig(minmi=50)
        modules = [_module("x.py", 10), _module("x.py", 20)]
        assert failing_modules(modules, config) == ["x.py"]

    def test_order_follows_reports(self):
        config = ReportConfig(maxcyc=1)
        modules = [
            _module("b.py", functions=[_function(2)]),
            _module("ok.py", functions=[_function(1)]),
            _module("a.py", functions=[_function(3)]),
        ]
        assert failing_modules(modules, config) == ["b.py", "a.py"]


class TestProjectThresholds:
    @pytest.mark.parametrize(
        "option, metrics",
        [
            ("maxfod", {"fod": 30.0}),
            ("maxcost", {"cost": 30.0}),
            ("maxsize", {"size": 30.0}),
        ],
    )
    def test_each_project_metric(self, option, metrics):
        result = _result(**metrics)
        assert is_project_too_complex(result, ReportConfig(**{option: 20}))
        assert not is_project_too_complex(result, ReportConfig(**{option: 30}))

    def test_project_breach_message(self):
        verdict = evaluate(_result(fod=50.0), ReportConfig(maxfod=10))
        assert verdict.project_breached
        assert verdict.message == PROJECT_BREACH_MESSAGE


class TestEvaluate:
    def test_no_thresholds_never_breach(self):
        result = _result(
            [_module(maintainability=-50, functions=[_function(999, 999, 999, 999, 999)])],
            fod=100.0,
            cost=100.0,
            size=100.0,
        )
        verdict = evaluate(result, ReportConfig())
        assert not verdict.breached
        assert verdict.message is None

    def test_module_failure_wins_over_project(self):
        config = ReportConfig(maxcyc=1, maxfod=1)
        result = _result([_module("m.py", functions=[_function(5)])], fod=90.0)
        verdict = evaluate(result, config)
        assert verdict.failing_modules == ["m.py"]
        assert verdict.project_breached is False
        assert verdict.message == f"{MODULE_BREACH_MESSAGE}\nFailing modules:\nm.py"
