import asyncio
import subprocess
from pathlib import Path
from typing import List, Tuple, Union

from z3str.core.errors import SolverProcessError
from z3str.core.logging import get_logger

logger = get_logger(__name__)

Z3_INVOCATION = "Z3-str.py"
INPUT_FLAG = "-f"

OUTPUT_ENCODING = "utf-8"
READ_CHUNK_SIZE = 4096

def build_invocation(problem_path: Union[str, Path]) -> str:
    """Returns the full solver command line for a staged problem file."""
    return f"{Z3_INVOCATION} {INPUT_FLAG} {problem_path}"

def command_to_args(command: str) -> Tuple[str, List[str]]:
    """Splits a command line on whitespace into (executable, args)."""
    split = command.split()
    if not split:
        raise ValueError("Empty solver command")
    return split[0], split[1:]

def _decode(data: bytes) -> str:
    return data.decode(OUTPUT_ENCODING, errors="replace")

def run_sync(command: str) -> str:
    """
    Runs the solver to completion and returns its stdout.
    Raises SolverProcessError on a non-zero exit or if the process cannot start.
    """
    executable, args = command_to_args(command)
    logger.debug(f"Running: {command}")
    try:
        result = subprocess.run([executable] + args, capture_output=True)
    except OSError as e:
        raise SolverProcessError(f"Failed to start {executable}: {e}") from e

    stdout = _decode(result.stdout)
    stderr = _decode(result.stderr)
    logger.debug(f"{executable} exited with code {result.returncode}")

    if result.returncode != 0:
        raise SolverProcessError(stderr, returncode=result.returncode, stderr=stderr, stdout=stdout)
    return stdout

async def _drain(stream: asyncio.StreamReader, chunks: List[bytes]) -> None:
    while True:
        chunk = await stream.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)

async def run_async(command: str) -> str:
    """
    Spawns the solver, collects stdout and stderr as they arrive and
    returns stdout once the process exits with code 0.
    Raises SolverProcessError with the collected stderr otherwise.
    """
    executable, args = command_to_args(command)
    logger.debug(f"Spawning: {command}")
    try:
        proc = await asyncio.create_subprocess_exec(
            executable, *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise SolverProcessError(f"Failed to start {executable}: {e}") from e

    out_chunks: List[bytes] = []
    err_chunks: List[bytes] = []
    await asyncio.gather(
        _drain(proc.stdout, out_chunks),
        _drain(proc.stderr, err_chunks),
    )
    returncode = await proc.wait()

    stdout = _decode(b"".join(out_chunks))
    stderr = _decode(b"".join(err_chunks))
    logger.debug(f"{executable} exited with code {returncode}")

    if returncode != 0:
        raise SolverProcessError(stderr, returncode=returncode, stderr=stderr, stdout=stdout)
    return stdout
