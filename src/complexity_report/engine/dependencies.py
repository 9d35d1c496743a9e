"""Import extraction and resolution between collected modules.

Absolute imports resolve against import roots. A file's import root is the
parent of its highest ancestor package (a directory holding a collected
``__init__.py``), or its own directory when no ancestor is a package. Plain
directories nested inside an importer's root are not on its import path, so
``import logging`` in ``app/main.py`` never binds to ``app/util/logging.py``.
"""

import ast
import os
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set


def module_parts(path: str) -> List[str]:
    """Path components of a module, extension and ``__init__`` dropped.

    ``/src/pkg/mod.py`` -> ``["src", "pkg", "mod"]``;
    ``/src/pkg/__init__.py`` -> ``["src", "pkg"]``.
    """
    stem, _ = os.path.splitext(os.path.normpath(path))
    parts = _parts(stem)
    if parts and parts[-1] == "__init__":
        parts = parts[:-1]
    return parts


def import_root(path: str, packages: Set[str]) -> str:
    """Directory a module's dotted name is relative to."""
    current = os.path.dirname(os.path.normpath(path))
    root = current
    while True:
        if current in packages:
            root = os.path.dirname(current)
        parent = os.path.dirname(current)
        if parent == current:
            return root
        current = parent


def dotted_name(path: str, root: str) -> str:
    parts = module_parts(path)
    return ".".join(parts[len(_parts(root)):])


class ModuleIndex:
    """Maps dotted module names onto the collected file paths."""

    def __init__(self, paths: Iterable[str]):
        self.paths = sorted(set(paths))
        self._packages = {
            os.path.dirname(os.path.normpath(p))
            for p in self.paths
            if os.path.basename(p) == "__init__.py"
        }
        self._roots: Dict[str, str] = {}
        self._by_name: Dict[str, List[str]] = defaultdict(list)
        self._by_file: Dict[str, str] = {}
        for path in self.paths:
            self._by_file[os.path.normpath(path)] = path
            root = import_root(path, self._packages)
            self._roots[path] = root
            name = dotted_name(path, root)
            if name:
                self._by_name[name].append(path)

    def root_of(self, path: str) -> str:
        root = self._roots.get(path)
        if root is None:
            root = import_root(path, self._packages)
        return root

    def visible(self, candidate: str, importer: str) -> bool:
        """Whether ``candidate``'s import root is on ``importer``'s import path."""
        theirs = self.root_of(candidate)
        ours = self.root_of(importer)
        return theirs == ours or not _is_nested(theirs, ours)

    def by_name(self, name: str, importer: str) -> Optional[str]:
        """Resolve an absolute dotted name, preferring modules near the importer."""
        candidates = [c for c in self._by_name.get(name, ()) if self.visible(c, importer)]
        if not candidates:
            return None
        ours = self.root_of(importer)
        here = module_parts(importer)
        # candidates are already sorted, so max() keeps the first on ties
        return max(
            candidates,
            key=lambda c: (self.root_of(c) == ours, _shared_prefix(here, module_parts(c))),
        )

    def by_file(self, base: str, dotted: str) -> Optional[str]:
        """Resolve a dotted name relative to a directory on disk."""
        target = os.path.join(base, *dotted.split(".")) if dotted else base
        for candidate in (target + ".py", os.path.join(target, "__init__.py")):
            found = self._by_file.get(os.path.normpath(candidate))
            if found:
                return found
        return None


def resolve_dependencies(path: str, tree: ast.AST, index: ModuleIndex) -> List[str]:
    """Paths of collected modules that ``path`` imports, sorted, without itself."""
    found: Set[str] = set()

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                _add(found, index.by_name(alias.name, path))
        elif isinstance(node, ast.ImportFrom):
            if node.level:
                base = os.path.dirname(path)
                for _ in range(node.level - 1):
                    base = os.path.dirname(base)
                module = node.module or ""
                _add(found, index.by_file(base, module) if module else None)
                for alias in node.names:
                    dotted = f"{module}.{alias.name}" if module else alias.name
                    _add(found, index.by_file(base, dotted))
            elif node.module:
                _add(found, index.by_name(node.module, path))
                for alias in node.names:
                    _add(found, index.by_name(f"{node.module}.{alias.name}", path))

    found.discard(path)
    return sorted(found)


def _parts(path: str) -> List[str]:
    return [p for p in os.path.normpath(path).split(os.sep) if p not in ("", ".")]


def _is_nested(inner: str, outer: str) -> bool:
    """True when ``inner`` lies strictly below ``outer``."""
    a, b = _parts(inner), _parts(outer)
    return len(a) > len(b) and a[: len(b)] == b


def _shared_prefix(a: List[str], b: List[str]) -> int:
    count = 0
    for x, y in zip(a, b):
        if x != y:
            break
        count += 1
    return count


def _add(found: Set[str], resolved: Optional[str]) -> None:
    if resolved is not None:
        found.add(resolved)
