"""Parallel batch intersection of many curve pairs.

Every curve pair is independent, so pairs are processed in worker processes
using ProcessPoolExecutor.

Key components:
- intersect_pair: Top-level picklable function for parallel execution
- IntersectionProcessor: Orchestrator for a batch of curve pairs
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any

from algeo.config import AlgeoSettings, IntersectionConfig
from algeo.core.intersect import intersect_cubic
from algeo.domain import CurvePair, Intersection
from algeo.exceptions import ProcessingCancelledError
from algeo.utils import ProcessingLogger, ProcessingStats, configure_logging


def intersect_pair(pair_dict: dict[str, Any], config_dict: dict[str, Any]) -> dict[str, Any]:
    """Intersect a single curve pair.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        pair_dict: Serialized curve pair (from CurvePair.to_dict())
        config_dict: Serialized intersection configuration

    Returns:
        Dictionary containing either:
        - Success: {"name": str, "intersections": [...], "duration_ms": float}
        - Error: {"error": str, "name": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        pair = CurvePair.from_dict(pair_dict)
        config = IntersectionConfig(**config_dict)

        found = sorted(
            intersect_cubic(pair.a, pair.b, config=config),
            key=lambda hit: (float(hit[1].x), float(hit[1].y)),
        )
        intersections = [Intersection(t=t, point=point).to_dict() for t, point in found]

        duration_ms = (time.time() - start_time) * 1000
        return {
            "name": pair.name,
            "intersections": intersections,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "name": pair_dict.get("name", "unknown"),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class IntersectionProcessor:
    """Orchestrates parallel intersection of a batch of curve pairs.

    Example:
        processor = IntersectionProcessor(AlgeoSettings())
        results, stats = processor.process(pairs, max_workers=4)
    """

    def __init__(self, config: AlgeoSettings) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings containing intersection and processing config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def process(
        self,
        pairs: list[CurvePair],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> tuple[list[CurvePair], ProcessingStats]:
        """Intersect every curve pair.

        Pairs whose name repeats an earlier pair are skipped.
        Statistics cover this call only.

        Args:
            pairs: Curve pairs to process
            max_workers: Maximum worker processes (None = config default,
                1 = run in this process)
            progress_callback: Optional callback(completed, total, pair_name, success)

        Returns:
            Tuple of (successful pairs with intersections filled in, in input
            order; statistics)

        Raises:
            ProcessingCancelledError: If processing is interrupted by the user
        """
        self.processing_logger = ProcessingLogger(self.logger)
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        self.logger.info("Starting batch intersection", pairs=len(pairs), max_workers=max_workers)

        config_dict = self.config.intersection.model_dump()
        results: dict[str, dict[str, Any]] = {}

        # Results are keyed by name
        unique: list[CurvePair] = []
        seen: set[str] = set()
        for pair in pairs:
            if pair.name in seen:
                self.processing_logger.log_pair_skipped(pair.name, "duplicate name")
                continue
            seen.add(pair.name)
            unique.append(pair)

        if max_workers == 1:
            self._process_inline(unique, config_dict, results, progress_callback)
        else:
            self._process_parallel(unique, config_dict, max_workers, results, progress_callback)

        processed = []
        for pair in unique:
            result = results.get(pair.name)
            if result is None:
                continue
            intersections = [Intersection.from_dict(i) for i in result["intersections"]]
            processed.append(CurvePair(name=pair.name, a=pair.a, b=pair.b, intersections=intersections))

        stats.end_time = time.time()

        self.logger.info(
            "Batch complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            intersections=stats.intersections_found,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return processed, stats

    def _record(self, name: str, result: dict[str, Any], results: dict[str, dict[str, Any]]) -> bool:
        """Record a worker result. Returns True on success."""
        if "error" in result:
            self.processing_logger.log_pair_error(
                pair_name=name,
                error=Exception(result["error"]),
                traceback=result.get("traceback"),
            )
            return False

        results[name] = result
        duration_ms = result.get("duration_ms", 0.0)
        self.processing_logger.log_pair_complete(
            pair_name=name,
            intersections=len(result["intersections"]),
            duration_ms=duration_ms,
        )
        self.processing_logger.stats.pair_timings_ms.append(duration_ms)
        return True

    def _process_inline(
        self,
        pairs: list[CurvePair],
        config_dict: dict[str, Any],
        results: dict[str, dict[str, Any]],
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> None:
        total = len(pairs)
        for completed, pair in enumerate(pairs, start=1):
            self.processing_logger.log_pair_start(pair.name)
            success = self._record(pair.name, intersect_pair(pair.to_dict(), config_dict), results)
            if progress_callback is not None:
                progress_callback(completed, total, pair.name, success)

    def _process_parallel(
        self,
        pairs: list[CurvePair],
        config_dict: dict[str, Any],
        max_workers: int | None,
        results: dict[str, dict[str, Any]],
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> None:
        stats = self.processing_logger.stats
        total = len(pairs)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for pair in pairs:
                future = executor.submit(intersect_pair, pair.to_dict(), config_dict)
                pending_futures[future] = pair.name

            try:
                for future in as_completed(pending_futures):
                    name = pending_futures.pop(future)
                    success = False

                    try:
                        success = self._record(name, future.result(), results)
                    except Exception as e:
                        # Executor-level error
                        self.processing_logger.log_pair_error(
                            pair_name=name,
                            error=e,
                            traceback=traceback.format_exc(),
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, name, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)
                executor.shutdown(wait=True, cancel_futures=True)
                raise ProcessingCancelledError(stats.processed_count, len(pending_futures)) from None
