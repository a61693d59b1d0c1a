"""
Core module for z3str.
Provides error handling, logging, configuration and types.
"""
from z3str.core.errors import (
    Z3StrError, StageWriteError, SolverProcessError, SolverOutputError, InternalInconsistency
)
from z3str.core.logging import get_logger
from z3str.core.config import SolverConfig
from z3str.core.types import Assignment, Solution, solution_to_jsonable

__all__ = [
    "Z3StrError", "StageWriteError", "SolverProcessError", "SolverOutputError", "InternalInconsistency",
    "get_logger",
    "SolverConfig",
    "Assignment", "Solution", "solution_to_jsonable",
]
