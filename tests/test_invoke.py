import asyncio

import pytest

from z3str.core.errors import SolverProcessError
from z3str.invoke import build_invocation, command_to_args, run_async, run_sync

def test_build_invocation():
    assert build_invocation("/tmp/p.smt2") == "Z3-str.py -f /tmp/p.smt2"

def test_command_to_args():
    assert command_to_args("Z3-str.py -f /tmp/p.smt2") == ("Z3-str.py", ["-f", "/tmp/p.smt2"])

def test_command_to_args_empty():
    with pytest.raises(ValueError):
        command_to_args("   ")

def test_run_sync_returns_stdout(fake_solver, problem_file):
    problem_file.save("x : Int -> 5\n")
    stdout = run_sync(build_invocation(problem_file.path))
    assert stdout == "* fake Z3-str *\nx : Int -> 5\n"

def test_run_sync_nonzero_exit(fake_solver, problem_file):
    problem_file.save("FAIL")
    with pytest.raises(SolverProcessError) as excinfo:
        run_sync(build_invocation(problem_file.path))
    assert excinfo.value.returncode == 2
    assert "fake solver failure" in excinfo.value.stderr
    assert "fake solver failure" in str(excinfo.value)

def test_run_sync_missing_executable(tmp_path):
    with pytest.raises(SolverProcessError) as excinfo:
        run_sync(f"{tmp_path / 'no-such-solver'} -f x.smt2")
    assert isinstance(excinfo.value.__cause__, OSError)
    assert excinfo.value.returncode is None

def test_run_async_returns_stdout(fake_solver, problem_file):
    problem_file.save("x : Int -> 5\n")
    stdout = asyncio.run(run_async(build_invocation(problem_file.path)))
    assert stdout == "* fake Z3-str *\nx : Int -> 5\n"

def test_run_async_large_output(fake_solver, problem_file):
    body = "".join(f"v{i} : Int -> {i}\n" for i in range(5000))
    problem_file.save(body)
    stdout = asyncio.run(run_async(build_invocation(problem_file.path)))
    assert stdout.endswith(body)

def test_run_async_nonzero_exit(fake_solver, problem_file):
    problem_file.save("FAIL")
    with pytest.raises(SolverProcessError) as excinfo:
        asyncio.run(run_async(build_invocation(problem_file.path)))
    assert excinfo.value.returncode == 2
    assert excinfo.value.stderr == "fake solver failure\n"

def test_run_async_missing_executable(tmp_path):
    with pytest.raises(SolverProcessError) as excinfo:
        asyncio.run(run_async(f"{tmp_path / 'no-such-solver'} -f x.smt2"))
    assert isinstance(excinfo.value.__cause__, OSError)
