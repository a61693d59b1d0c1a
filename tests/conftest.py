import os
import sys
from pathlib import Path

import pytest

from z3str.staging import ProblemFile

# Echoes the problem file back as solver output after a banner line.
# A problem containing FAIL makes it exit non-zero with a message on stderr.
FAKE_SOLVER = """#!{python}
import sys

path = sys.argv[sys.argv.index("-f") + 1]
with open(path, "rb") as f:
    problem = f.read()

if b"FAIL" in problem:
    sys.stderr.write("fake solver failure\\n")
    sys.exit(2)

sys.stdout.buffer.write(b"* fake Z3-str *\\n")
sys.stdout.buffer.write(problem)
"""

@pytest.fixture
def fake_solver(tmp_path, monkeypatch):
    """Puts a fake Z3-str.py first on PATH and returns its directory."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "Z3-str.py"
    script.write_text(FAKE_SOLVER.format(python=sys.executable))
    script.chmod(0o755)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return bin_dir

@pytest.fixture
def problem_file(tmp_path):
    staged = ProblemFile.create(dir=str(tmp_path))
    yield staged
    staged.close()
