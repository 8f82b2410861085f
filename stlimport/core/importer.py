"""Sniff-then-decode import pipeline."""

import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from stlimport.core.config import Config
from stlimport.core.exceptions import FormatError
from stlimport.core.model import Model
from stlimport.processing import BinaryStlDecoder, classify
from stlimport.utils.logging import get_logger, log_import_result, log_performance

logger = get_logger(__name__)


class ImportResult:
    """Result of an import operation."""

    def __init__(
        self,
        success: bool,
        path: Path,
        probability: float,
        model: Optional[Model] = None,
        error: Optional[str] = None,
        metrics: Optional[Dict[str, Any]] = None,
    ):
        """Initialize import result.

        Args:
            success: Whether the file was accepted and decoded
            path: Input file path
            probability: Sniffer probability that the file is a binary STL
            model: Decoded model (if successful)
            error: Error message (if rejected or unreadable)
            metrics: Timing and size metrics
        """
        self.success = success
        self.path = path
        self.probability = probability
        self.model = model
        self.error = error
        self.metrics = metrics or {}


class Importer:
    """Decodes files the sniffer accepts as binary STL."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize importer.

        Args:
            config: Configuration object
        """
        self.config = config or Config()

    @property
    def min_probability(self) -> float:
        return self.config.importer.min_probability

    def accepts(self, probability: float) -> bool:
        return probability >= self.min_probability

    def import_file(self, path: Union[str, Path]) -> ImportResult:
        """Sniff a file and decode it when the probability is high enough.

        Args:
            path: Path to the input file

        Returns:
            ImportResult; rejected or unreadable files give ``success=False``
        """
        path = Path(path)
        start_time = time.perf_counter()

        probability = classify(path)
        metrics: Dict[str, Any] = {}

        if not self.accepts(probability):
            result = ImportResult(
                success=False,
                path=path,
                probability=probability,
                error=(
                    f"Not a binary STL file (probability {probability:.6g} "
                    f"< {self.min_probability})"
                ),
                metrics=metrics,
            )
        else:
            decoder = BinaryStlDecoder(show_progress=self.config.importer.show_progress)
            try:
                model = decoder.decode(path)
            except FormatError as e:
                result = ImportResult(
                    success=False,
                    path=path,
                    probability=probability,
                    error=str(e),
                    metrics=metrics,
                )
            else:
                metrics["face_count"] = model.face_count
                result = ImportResult(
                    success=True,
                    path=path,
                    probability=probability,
                    model=model,
                    metrics=metrics,
                )

        result.metrics["total_time"] = round(time.perf_counter() - start_time, 4)
        log_import_result(logger, result)
        return result

    def import_batch(self, paths: List[Union[str, Path]]) -> List[ImportResult]:
        """Import several files one after another."""
        start_time = time.perf_counter()
        results = [self.import_file(path) for path in paths]
        log_performance(
            logger,
            "import_batch",
            time.perf_counter() - start_time,
            files=len(results),
            imported=sum(1 for r in results if r.success),
        )
        return results
