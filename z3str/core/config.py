import dataclasses
import os

INPUT_FILE_MODE = 0o644
INPUT_FILE_PREFIX = "python-z3str2-"
INPUT_FILE_EXTENSION = ".smt2"

@dataclasses.dataclass
class SolverConfig:
    trace: bool = False
    input_prefix: str = INPUT_FILE_PREFIX
    input_suffix: str = INPUT_FILE_EXTENSION
    input_mode: int = INPUT_FILE_MODE

    @staticmethod
    def from_env() -> 'SolverConfig':
        # Presence alone turns tracing on, the value is ignored
        return SolverConfig(trace="TRACE" in os.environ)
