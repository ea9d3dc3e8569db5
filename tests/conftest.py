"""
Pytest configuration for adjgraph tests.

The library is imported in-process; the CLI is exercised through
subprocess + piped stdin, the way a user drives the menu.
"""
import os
import subprocess
import sys

import pytest

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PY_DIR = os.path.join(BASE_DIR, "py")
sys.path.insert(0, PY_DIR)

import adjgraph  # noqa: E402


@pytest.fixture(scope="session")
def lib():
    """The adjgraph package."""
    return adjgraph


@pytest.fixture
def directed():
    return adjgraph.Graph(directed=True)


@pytest.fixture
def undirected():
    return adjgraph.Graph(directed=False)


@pytest.fixture
def seeded_directed():
    """Directed starter graph: A->B, A->C, B->D, C->D, D->E."""
    return adjgraph.seed_graph(adjgraph.Graph(directed=True))


@pytest.fixture
def seeded_undirected():
    """Undirected starter graph: A-B, A-C, B-D, C-D."""
    return adjgraph.seed_graph(adjgraph.Graph(directed=False))


class CLIBridge:
    """Runs ``python -m adjgraph`` with scripted menu input."""

    def __init__(self, py_dir):
        self.py_dir = py_dir

    def run(self, lines, *args, env=None):
        run_env = dict(os.environ)
        for key in ("ADJGRAPH_DIRECTED", "ADJGRAPH_NO_SEED", "ADJGRAPH_LOG_LEVEL"):
            run_env.pop(key, None)
        run_env["PYTHONPATH"] = self.py_dir + os.pathsep + run_env.get("PYTHONPATH", "")
        run_env.update(env or {})
        input_data = "".join(line + "\n" for line in lines)
        return subprocess.run(
            [sys.executable, "-m", "adjgraph", *args],
            input=input_data,
            capture_output=True,
            text=True,
            env=run_env,
            timeout=30,
        )


@pytest.fixture
def cli():
    return CLIBridge(PY_DIR)
