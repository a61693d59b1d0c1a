from typing import Optional


class Z3StrError(Exception):
    """Base exception for all z3str related errors."""
    pass

class StageWriteError(Z3StrError):
    """Raised when the problem text cannot be written to the staged input file."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

class SolverProcessError(Z3StrError):
    """Raised when the solver cannot be spawned or exits with a non-zero code."""

    def __init__(self, message: str, returncode: Optional[int] = None,
                 stderr: str = "", stdout: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
        self.stdout = stdout

class SolverOutputError(Z3StrError):
    """Raised when the solver reports an error in its output."""

    def __init__(self, output: str):
        super().__init__(output)
        self.output = output

class InternalInconsistency(Z3StrError, AssertionError):
    """Raised when a satisfiable result carries no assignments."""
    pass
