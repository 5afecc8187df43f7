# threaded_runner.py - wrapper to run functions in threads and collect their results.

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Sequence


def run_parallel(tasks: Sequence[Callable[[], Any]], max_workers: int = 4) -> List[Any]:
    """
    Run callables (no-arg functions) in a small thread pool and return results in submission order.
    Each task should be a zero-argument lambda or function. The first task exception is re-raised.
    """
    if not tasks:
        return []
    with ThreadPoolExecutor(max_workers=min(max_workers, len(tasks))) as ex:
        futs = [ex.submit(t) for t in tasks]
        return [f.result() for f in futs]


def run_serial(tasks: Sequence[Callable[[], Any]]) -> List[Any]:
    """Same contract as run_parallel, on the calling thread."""
    return [t() for t in tasks]
