import atexit
import threading
from typing import Optional

from z3str.core.config import SolverConfig
from z3str.core.logging import get_logger
from z3str.core.types import Solution
from z3str.invoke import build_invocation, run_async, run_sync
from z3str.parser import parse_solution
from z3str.staging import ProblemFile

logger = get_logger(__name__)

class Z3StrSolver:
    """
    Stages a problem, runs Z3-str on it and parses the answer.

    All solves go through one ProblemFile, so at most one solve may be in
    flight per solver. This is not enforced here.
    """

    def __init__(self, problem_file: Optional[ProblemFile] = None, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig.from_env()
        self.problem_file = problem_file or ProblemFile.create(
            prefix=self.config.input_prefix,
            suffix=self.config.input_suffix,
            mode=self.config.input_mode,
        )

    def solve_sync(self, problem: str) -> Solution:
        path = self.problem_file.save(problem)
        stdout = run_sync(build_invocation(path))
        return parse_solution(stdout, trace=self.config.trace)

    async def solve(self, problem: str) -> Solution:
        # staging must finish before the solver is spawned
        path = await self.problem_file.save_async(problem)
        stdout = await run_async(build_invocation(path))
        return parse_solution(stdout, trace=self.config.trace)

    def close(self) -> None:
        self.problem_file.close()


_default_solver: Optional[Z3StrSolver] = None
_default_lock = threading.Lock()

def get_default_solver() -> Z3StrSolver:
    """Returns the process-wide solver, creating its input file on first use."""
    global _default_solver
    with _default_lock:
        if _default_solver is None:
            _default_solver = Z3StrSolver()
            atexit.register(_default_solver.close)
            logger.debug(f"Default problem file: {_default_solver.problem_file.path}")
        return _default_solver

def solve_sync(problem: str) -> Solution:
    """Blocking solve on the process-wide input file."""
    return get_default_solver().solve_sync(problem)

async def solve(problem: str) -> Solution:
    """Non-blocking solve on the process-wide input file."""
    return await get_default_solver().solve(problem)
