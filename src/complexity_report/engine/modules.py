"""Per-module metrics on top of radon.

radon supplies cyclomatic complexity, Halstead measures and the
maintainability index. The engine switches (``logicalor``, ``switchcase``,
``forin``, ``trycatch``) decide which constructs count as branches; radon's
per-function counts are corrected for the constructs that are switched off.
"""

import ast
from typing import Iterator, List, Tuple, Union

from radon.complexity import cc_visit_ast
from radon.metrics import h_visit_ast, mi_visit

from ..config import EngineOptions
from ..models import FunctionReport, HalsteadMetrics, ModuleReport

FunctionNode = Union[ast.FunctionDef, ast.AsyncFunctionDef]

# radon reports maintainability on a 0-100 scale; the classic index is 0-171
CLASSIC_MI_SCALE = 171.0 / 100.0


def prepare_source(text: str) -> str:
    """Re-comment a normalized ``//!`` shebang line for the Python parser."""
    if text.startswith("//!"):
        return "#" + text
    return text


def halstead_metrics(report) -> HalsteadMetrics:
    """Convert a radon ``HalsteadReport`` into our model."""
    return HalsteadMetrics(
        operators_distinct=report.h1,
        operands_distinct=report.h2,
        operators_total=report.N1,
        operands_total=report.N2,
        vocabulary=report.vocabulary,
        length=report.length,
        volume=float(report.volume),
        difficulty=float(report.difficulty),
        effort=float(report.effort),
        bugs=float(report.bugs),
        time=float(report.time),
    )


def _body_nodes(node: FunctionNode) -> Iterator[ast.AST]:
    """Walk a function body without descending into nested defs or classes.

    Matches what radon counts towards the enclosing function.
    """
    stack: List[ast.AST] = list(node.body)
    while stack:
        current = stack.pop()
        yield current
        for child in ast.iter_child_nodes(current):
            if isinstance(child, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
                continue
            stack.append(child)


def _match_branches(node: ast.AST) -> int:
    cases = node.cases
    has_wildcard = any(getattr(case.pattern, "pattern", False) is None for case in cases)
    return max(0, len(cases) - has_wildcard)


def switched_off_branches(node: FunctionNode, options: EngineOptions) -> int:
    """Branches radon counted that the engine options exclude."""
    excluded = 0
    for child in _body_nodes(node):
        if not options.logicalor and isinstance(child, ast.BoolOp) and isinstance(child.op, ast.Or):
            excluded += len(child.values) - 1
        elif not options.trycatch and isinstance(child, ast.Try):
            excluded += len(child.handlers)
        elif not options.forin and isinstance(child, (ast.For, ast.AsyncFor, ast.comprehension)):
            excluded += 1
        elif not options.switchcase and type(child).__name__ == "Match":
            excluded += _match_branches(child)
    return excluded


def logical_sloc(node: FunctionNode) -> int:
    """Number of statements in a function body, at least one."""
    return max(1, sum(1 for child in _body_nodes(node) if isinstance(child, ast.stmt)))


def function_nodes(node: ast.AST, prefix: str = "") -> Iterator[Tuple[str, FunctionNode]]:
    """Every function and method below ``node`` with its qualified name.

    Nested functions and methods of nested classes are included:
    ``outer.inner``, ``Outer.Inner.method``.
    """
    for child in ast.iter_child_nodes(node):
        if isinstance(child, (ast.FunctionDef, ast.AsyncFunctionDef)):
            name = prefix + child.name
            yield name, child
            yield from function_nodes(child, name + ".")
        elif isinstance(child, ast.ClassDef):
            yield from function_nodes(child, prefix + child.name + ".")
        else:
            yield from function_nodes(child, prefix)


def radon_complexity(node: FunctionNode) -> int:
    """radon's cyclomatic complexity of one function, closures excluded."""
    blocks = cc_visit_ast(node)
    return blocks[0].complexity if blocks else 1


def function_halstead(node: FunctionNode) -> HalsteadMetrics:
    report = h_visit_ast(node)
    if report.functions:
        return halstead_metrics(report.functions[0][1])
    return halstead_metrics(report.total)


def analyse_function(name: str, node: FunctionNode, options: EngineOptions) -> FunctionReport:
    cyclomatic = max(1, radon_complexity(node) - switched_off_branches(node, options))
    sloc = logical_sloc(node)
    return FunctionReport(
        name=name,
        line=node.lineno,
        cyclomatic=cyclomatic,
        cyclomatic_density=cyclomatic / sloc * 100.0,
        sloc=sloc,
        halstead=function_halstead(node),
    )


def analyse_module(path: str, text: str, tree: ast.AST, options: EngineOptions) -> ModuleReport:
    """Compute the metrics of one module.

    Functions are reported in source order, nested definitions included.
    """
    nodes = sorted(function_nodes(tree), key=lambda item: (item[1].lineno, item[1].col_offset))
    functions: List[FunctionReport] = [analyse_function(name, node, options) for name, node in nodes]

    maintainability = float(mi_visit(prepare_source(text), True))
    if not options.newmi:
        maintainability *= CLASSIC_MI_SCALE

    return ModuleReport(
        path=path,
        maintainability=maintainability,
        functions=functions,
        cyclomatic=1 + sum(f.cyclomatic - 1 for f in functions),
        sloc=sum(1 for child in ast.walk(tree) if isinstance(child, ast.stmt)),
        halstead=halstead_metrics(h_visit_ast(tree).total),
    )
