"""The staff roll and the text file it is kept in."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from operator import attrgetter
from pathlib import Path

from staffroll.workers import Worker, create_worker

DEFAULT_FILENAME = "empFile.txt"


class LoadState(Enum):
    """What was found when the roll file was read."""

    MISSING = "missing"
    EMPTY = "empty"
    LOADED = "loaded"


def _records(text: str) -> Iterator[tuple[int, str, int]]:
    """Yield (id, name, department) triples until the text stops matching."""
    tokens = iter(text.split())
    for id_token in tokens:
        name = next(tokens, None)
        dept_token = next(tokens, None)
        if name is None or dept_token is None:
            return
        try:
            worker_id = int(id_token)
            dept_id = int(dept_token)
        except ValueError:
            return
        yield worker_id, name, dept_id


def read_workers(path: str | Path) -> list[Worker]:
    """Read every complete record from a roll file."""
    text = Path(path).read_text(encoding="utf-8")
    return [create_worker(*record) for record in _records(text)]


def write_workers(path: str | Path, workers: Iterable[Worker]) -> None:
    """Write workers to a roll file, one "id name department" line each."""
    with open(path, "w", encoding="utf-8") as stream:
        stream.writelines(
            f"{worker.worker_id} {worker.name} {worker.dept_id}\n" for worker in workers
        )


class WorkerManager:
    """The staff roll, saved to its file after every change."""

    def __init__(self, path: str | Path = DEFAULT_FILENAME) -> None:
        self.path = Path(path)
        self.workers: list[Worker] = []

    def __len__(self) -> int:
        return len(self.workers)

    def __iter__(self) -> Iterator[Worker]:
        return iter(self.workers)

    @property
    def is_empty(self) -> bool:
        """True when the roll holds nobody."""
        return not self.workers

    def load(self) -> LoadState:
        """Replace the roll with the contents of its file."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self.workers = []
            return LoadState.MISSING
        if not text.strip():
            self.workers = []
            return LoadState.EMPTY
        self.workers = [create_worker(*record) for record in _records(text)]
        return LoadState.LOADED

    def save(self) -> None:
        """Write the roll to its file."""
        write_workers(self.path, self.workers)

    def add(self, workers: Iterable[Worker]) -> int:
        """Append workers to the roll and save; return how many were added."""
        new = list(workers)
        self.workers.extend(new)
        self.save()
        return len(new)

    def index_of(self, worker_id: int) -> int | None:
        """Position of the first worker with this id, or None."""
        return next(
            (index for index, worker in enumerate(self.workers) if worker.worker_id == worker_id),
            None,
        )

    def find_by_id(self, worker_id: int) -> Worker | None:
        """The first worker with this id, or None."""
        index = self.index_of(worker_id)
        return None if index is None else self.workers[index]

    def find_by_name(self, name: str) -> list[Worker]:
        """All workers with exactly this name, in roll order."""
        return [worker for worker in self.workers if worker.name == name]

    def _require_index(self, worker_id: int) -> int:
        index = self.index_of(worker_id)
        if index is None:
            raise KeyError(worker_id)
        return index

    def remove(self, worker_id: int) -> Worker:
        """Remove the first worker with this id and save; KeyError if absent."""
        removed = self.workers.pop(self._require_index(worker_id))
        self.save()
        return removed

    def replace(self, worker_id: int, worker: Worker) -> Worker:
        """Put a new worker in place of the one with this id and save."""
        index = self._require_index(worker_id)
        old = self.workers[index]
        self.workers[index] = worker
        self.save()
        return old

    def sort(self, ascending: bool = True) -> None:
        """Order the roll by worker id and save."""
        self.workers.sort(key=attrgetter("worker_id"), reverse=not ascending)
        self.save()