"""
Python bindings for the Z3-str string solver.

Stages a problem in a temp .smt2 file, runs ``Z3-str.py -f <file>`` and
parses the output into a list of assignments, or None when UNSAT.
"""
from z3str.core import (
    Z3StrError, StageWriteError, SolverProcessError, SolverOutputError, InternalInconsistency,
    SolverConfig, Assignment, Solution,
)
from z3str.parser import parse_solution
from z3str.staging import ProblemFile
from z3str.solver import Z3StrSolver, get_default_solver, solve, solve_sync

__all__ = [
    "Z3StrError", "StageWriteError", "SolverProcessError", "SolverOutputError", "InternalInconsistency",
    "SolverConfig", "Assignment", "Solution",
    "parse_solution", "ProblemFile", "Z3StrSolver", "get_default_solver", "solve", "solve_sync",
]
