"""
Batch scoring helper.

Scoring one element never depends on another, so large batches are fanned
out over a thread pool. Results always come back in input order, which keeps
the stable sort that follows deterministic.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, TypeVar

from placement_scoring.core.config import get_settings
from placement_scoring.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def score_in_parallel(
    func: Callable[[T], R],
    items: Iterable[T],
    max_workers: Optional[int] = None,
    threshold: Optional[int] = None
) -> List[R]:
    """
    Apply func to every item, in a thread pool for large inputs.

    Args:
        func: Pure scoring function of one item
        items: Elements to score
        max_workers: Pool size (defaults to settings.scoring_max_workers)
        threshold: Minimum batch size for the pool
            (defaults to settings.scoring_parallel_threshold)

    Returns:
        List of results, same order as items
    """
    settings = get_settings()
    items = list(items)
    max_workers = max_workers or settings.scoring_max_workers
    threshold = settings.scoring_parallel_threshold if threshold is None else threshold

    if len(items) < threshold or max_workers <= 1:
        return [func(item) for item in items]

    logger.info("Scoring %d items across %d workers", len(items), max_workers)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        # map() yields in submission order
        return list(executor.map(func, items))
