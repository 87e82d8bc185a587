"""Parallel processing utilities for scoring large response sets"""
import os
import time
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional
from quiz_insights.config.settings import ProcessingConfig

logger = logging.getLogger(__name__)


class ParallelProcessor:
    """Order-preserving thread pool mapping for stateless per-item work"""

    @staticmethod
    def calculate_optimal_workers(task_count: int) -> int:
        """Worker count bounded by config, CPU count and workload"""
        cpu_count = os.cpu_count() or 1
        workers = min(ProcessingConfig.MAX_WORKERS, cpu_count, task_count)
        return max(workers, 1)

    @staticmethod
    def map_ordered(tasks: List[Any], processor_func: Callable[[Any], Any],
                    threshold: Optional[int] = None) -> List[Any]:
        """
        Apply processor_func to every task and return results in task order.

        Below the threshold the work runs inline; at or above it a thread pool
        is used. executor.map yields in submission order, so any reduction over
        the result list is independent of scheduling.
        """
        if not tasks:
            return []

        threshold = ProcessingConfig.PARALLEL_SCORING_THRESHOLD if threshold is None else threshold
        if len(tasks) < threshold:
            return [processor_func(task) for task in tasks]

        start_time = time.time()
        max_workers = ParallelProcessor.calculate_optimal_workers(len(tasks))
        logger.debug("Using %d workers for %d tasks", max_workers, len(tasks))

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(processor_func, tasks))

        logger.debug("Processed %d tasks in %.3fs", len(results), time.time() - start_time)
        return results
