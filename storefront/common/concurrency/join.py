from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable, List, Optional

log = logging.getLogger(__name__)


def join_all(
    *calls: Callable[[], Any],
    name: str = "join",
    max_workers: Optional[int] = None,
) -> List[Any]:
    """
    Run independent callables concurrently and block until *every* one has
    finished, successfully or not.

    Returns the results in call order. If any callable raised, the first
    failure (in call order) is re-raised once all of them are done; later
    failures are only logged. Nothing is cancelled or rolled back.
    """
    if not calls:
        return []

    workers = max_workers or len(calls)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix=name) as executor:
        futures: List[Future[Any]] = [executor.submit(fn) for fn in calls]
        wait(futures)

    first_error: Optional[BaseException] = None
    for idx, fut in enumerate(futures):
        err = fut.exception()
        if err is None:
            continue
        if first_error is None:
            first_error = err
        else:
            log.error("%s task %d failed after an earlier failure: %s", name, idx, err)

    if first_error is not None:
        raise first_error
    return [f.result() for f in futures]
