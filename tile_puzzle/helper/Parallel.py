import concurrent.futures
import os
from typing import Callable, List


# ----------------------------------------------------------------------------------------------------------------------
def partition(count: int, workers: int) -> List[range]:
    """
    Splits the indexes 0 up to count into at most workers contiguous ranges of (almost) equal length.

    :param count: The number of indexes.
    :param workers: The number of workers.
    """
    workers = max(1, min(workers, count))
    size, remainder = divmod(count, workers)

    ranges = []
    start = 0
    for worker in range(workers):
        stop = start + size + (1 if worker < remainder else 0)
        if stop > start:
            ranges.append(range(start, stop))
        start = stop

    return ranges


# ----------------------------------------------------------------------------------------------------------------------
def parallel_for(body: Callable[[int], None], count: int, workers: int = 0) -> None:
    """
    Calls body for each index 0 up to count. The indexes are partitioned over a pool of threads and this function
    returns after all indexes have been processed. The first exception raised by body is raised again.

    :param body: The function to call for each index. Calls for different indexes must be independent.
    :param count: The number of indexes.
    :param workers: The number of threads. 0 for the number of CPUs.
    """
    if count <= 0:
        return

    if workers <= 0:
        workers = os.cpu_count() or 1

    ranges = partition(count, workers)
    if len(ranges) == 1:
        for index in ranges[0]:
            body(index)
        return

    def run(indexes: range) -> None:
        for index in indexes:
            body(index)

    with concurrent.futures.ThreadPoolExecutor(max_workers=len(ranges)) as executor:
        futures = [executor.submit(run, indexes) for indexes in ranges]
        for future in futures:
            future.result()

# ----------------------------------------------------------------------------------------------------------------------
