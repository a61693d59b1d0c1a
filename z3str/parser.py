import json
import re
import sys

from z3str.core.errors import InternalInconsistency, SolverOutputError
from z3str.core.logging import get_logger
from z3str.core.types import Assignment, Solution

logger = get_logger(__name__)

# <identifier> : <type> -> <json value>
ASSIGNMENT_PATTERN = re.compile(r"^([^:]+) : (\w)+ -> (.+)$", re.ASCII)
ERROR_PATTERN = re.compile(r"^\(error", re.MULTILINE)
UNSAT_PATTERN = re.compile(r"^>> UNSAT", re.MULTILINE)

def _reject_constant(name: str):
    # json.loads would otherwise accept NaN and Infinity
    raise ValueError(f"Invalid JSON constant {name}")

def parse_solution(output: str, trace: bool = False) -> Solution:
    """
    Interprets raw solver output.

    Returns None for an unsatisfiable problem, otherwise the assignments in
    the order the solver printed them. An error marker anywhere in the
    output wins over everything else.
    """
    if trace:
        print(output, file=sys.stderr)

    if ERROR_PATTERN.search(output):
        raise SolverOutputError(output)

    if UNSAT_PATTERN.search(output):
        logger.debug("Solver reported UNSAT")
        return None

    assignments = []
    for line in output.split("\n"):
        match = ASSIGNMENT_PATTERN.match(line)
        if not match:
            continue
        try:
            value = json.loads(match.group(3), parse_constant=_reject_constant)
        except ValueError as e:
            raise SolverOutputError(output) from e
        assignments.append(Assignment(name=match.group(1), value=value))

    if not assignments:
        raise InternalInconsistency("a SAT formula should return an assignment")

    logger.debug(f"Parsed {len(assignments)} assignments")
    return assignments
