"""Project-level coupling metrics over the module dependency matrix.

First-order density, change cost and core size follow MacCormack et al.'s
design structure matrix measures:

- first-order density: share of direct dependencies among all n x n cells;
- change cost: share of cells in the visibility matrix (transitive closure
  including each module seeing itself), i.e. how much of the project a change
  reaches on average;
- core size: share of modules whose visibility fan-in and fan-out are both
  non-zero and at or above the project medians.

All three are percentages.
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np


@dataclass
class CouplingMetrics:
    first_order_density: float
    change_cost: float
    core_size: float
    adjacency: np.ndarray
    visibility: np.ndarray


def adjacency_matrix(paths: Sequence[str], dependencies: Sequence[Sequence[str]]) -> np.ndarray:
    """Direct-dependency matrix; row i depends on column j. Diagonal is zero."""
    index = {path: i for i, path in enumerate(paths)}
    matrix = np.zeros((len(paths), len(paths)), dtype=np.int8)
    for i, deps in enumerate(dependencies):
        for dep in deps:
            j = index.get(dep)
            if j is not None and j != i:
                matrix[i, j] = 1
    return matrix


def visibility_matrix(adjacency: np.ndarray) -> np.ndarray:
    """Transitive closure of ``adjacency`` with the diagonal set (Warshall)."""
    n = adjacency.shape[0]
    reach = adjacency.astype(bool) | np.eye(n, dtype=bool)
    for k in range(n):
        reach |= np.outer(reach[:, k], reach[k, :])
    return reach.astype(np.int8)


def _percent(value: float, limit: float) -> float:
    if limit == 0:
        return 0.0
    return float(value) / float(limit) * 100.0


def core_size(visibility: np.ndarray) -> float:
    n = visibility.shape[0]
    if n == 0:
        return 0.0
    fan_out = visibility.sum(axis=1) - 1
    fan_in = visibility.sum(axis=0) - 1
    core = (
        (fan_in > 0)
        & (fan_out > 0)
        & (fan_in >= np.median(fan_in))
        & (fan_out >= np.median(fan_out))
    )
    return _percent(int(core.sum()), n)


def coupling_metrics(paths: Sequence[str], dependencies: Sequence[Sequence[str]]) -> CouplingMetrics:
    adjacency = adjacency_matrix(paths, dependencies)
    visibility = visibility_matrix(adjacency)
    cells = len(paths) * len(paths)
    return CouplingMetrics(
        first_order_density=_percent(int(adjacency.sum()), cells),
        change_cost=_percent(int(visibility.sum()), cells),
        core_size=core_size(visibility),
        adjacency=adjacency,
        visibility=visibility,
    )


def as_lists(matrix: np.ndarray) -> List[List[int]]:
    return [[int(cell) for cell in row] for row in matrix]
