import argparse
import asyncio
import json
import sys
import traceback

from z3str.core.types import Solution, solution_to_jsonable
from z3str.solver import solve, solve_sync

def format_solution(solution: Solution) -> str:
    return json.dumps(solution_to_jsonable(solution), indent=2)

def run_sync(problem: str) -> None:
    print(format_solution(solve_sync(problem)))

def run_async(problem: str) -> int:
    try:
        solution = asyncio.run(solve(problem))
    except Exception:
        traceback.print_exc()
        return 1
    print(format_solution(solution))
    return 0

def main():
    parser = argparse.ArgumentParser(
        description="z3str CLI - Read a Z3-str problem from stdin and print its solution."
    )
    parser.parse_args()

    # invalid UTF-8 becomes replacement characters instead of failing
    problem = sys.stdin.buffer.read().decode("utf-8", errors="replace")

    # run both sync and async
    print("\nrunning sync...")
    run_sync(problem)

    print("\nrunning async...")
    sys.stdout.flush()
    status = run_async(problem)
    if status:
        sys.exit(status)

if __name__ == "__main__":
    main()
