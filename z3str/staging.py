import asyncio
import os
import tempfile
from pathlib import Path
from typing import Optional

from z3str.core.config import INPUT_FILE_EXTENSION, INPUT_FILE_MODE, INPUT_FILE_PREFIX
from z3str.core.errors import StageWriteError
from z3str.core.logging import get_logger

logger = get_logger(__name__)

class ProblemFile:
    """
    Handle on the single input file the solver reads from.

    The path is allocated once and every save overwrites it, so a handle
    must not be shared by two solves that are in flight at the same time.
    Callers that need concurrency either serialize on their own lock or
    give each worker its own handle.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._closed = False

    @classmethod
    def create(cls, prefix: str = INPUT_FILE_PREFIX, suffix: str = INPUT_FILE_EXTENSION,
               mode: int = INPUT_FILE_MODE, dir: Optional[str] = None) -> 'ProblemFile':
        """Allocates a fresh temp file with the given permission mode."""
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=dir)
        os.close(fd)
        os.chmod(name, mode)
        logger.debug(f"Allocated problem file {name}")
        return cls(Path(name))

    def save(self, problem: str) -> Path:
        """Writes the problem verbatim to the staged path and returns it."""
        if self._closed:
            raise StageWriteError(f"Problem file {self.path} is closed", path=str(self.path))
        # encode before opening so an unencodable problem leaves the file untouched
        try:
            data = problem.encode("utf-8")
        except UnicodeEncodeError as e:
            raise StageWriteError(f"Problem is not valid UTF-8 text: {e}", path=str(self.path)) from e
        try:
            with open(self.path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise StageWriteError(f"Failed to stage problem at {self.path}: {e}", path=str(self.path)) from e
        logger.debug(f"Staged {len(problem)} chars at {self.path}")
        return self.path

    async def save_async(self, problem: str) -> Path:
        """Same as save() but runs the write in the loop's default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.save, problem)

    def read(self) -> str:
        with open(self.path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Removes the staged file. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass

    def __enter__(self) -> 'ProblemFile':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ProblemFile({str(self.path)!r})"
