"""Boundary test ensuring the inferrer stays free of database and I/O dependencies."""

import ast
from pathlib import Path


def test_introspection_has_no_forbidden_imports():
    """Verify introspection package does not import drivers or connection layers."""
    forbidden_prefixes = (
        "asyncpg",
        "psycopg",
        "sqlalchemy",
        "sqlite3",
        "mysql",
        "requests",
        "httpx",
    )

    package_src = Path(__file__).parents[3] / "src" / "introspection"
    violations = []

    for py_file in package_src.rglob("*.py"):
        tree = ast.parse(py_file.read_text())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name.startswith(forbidden_prefixes):
                        violations.append(f"{py_file.name}: import {alias.name}")
            elif isinstance(node, ast.ImportFrom):
                if node.module and node.module.startswith(forbidden_prefixes):
                    violations.append(f"{py_file.name}: from {node.module}")

    assert list(package_src.rglob("*.py")), f"No sources found under {package_src}"
    assert not violations, "Forbidden imports in introspection/:\n" + "\n".join(violations)
