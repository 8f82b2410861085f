"""Estimate how likely a file is to be a binary STL."""

from pathlib import Path
from typing import Union

from stlimport.processing.stl_format import (
    MIN_FILE_SIZE,
    expected_file_size,
    file_size,
    read_declared_count,
)
from stlimport.utils.logging import get_logger

logger = get_logger(__name__)

STL_EXTENSION = ".stl"

# Probability that a file named *.stl is not actually a binary STL. Probably an
# overestimation, so that the structure check dominates the result.
PROBABILITY_INCORRECT_EXTENSION = 0.01

# Probability that a file which is not a binary STL happens to have exactly
# 84 + 50 * N bytes, where N is the count stored at offset 80.
PROBABILITY_INCORRECT_SIZE = 0.0001


def extension_prior(filename: Union[str, Path]) -> float:
    """Prior probability of a binary STL given only the file name.

    The match is a case-sensitive suffix check on the name as given.
    """
    if str(filename).endswith(STL_EXTENSION):
        return 1.0 - PROBABILITY_INCORRECT_EXTENSION
    return PROBABILITY_INCORRECT_EXTENSION


def is_structurally_consistent(size: int, declared_count: int) -> bool:
    """Whether a file of ``size`` bytes matches its declared triangle count."""
    return size >= MIN_FILE_SIZE and size == expected_file_size(declared_count)


def update_probability(prior: float, consistent: bool) -> float:
    """Combine the extension prior with the outcome of the structure check."""
    if consistent:
        return 1.0 - (1.0 - prior) * PROBABILITY_INCORRECT_SIZE
    return prior * PROBABILITY_INCORRECT_SIZE


def _check_structure(filename: Union[str, Path]) -> bool:
    try:
        with open(filename, "rb") as f:
            size = file_size(f)
            if size < MIN_FILE_SIZE:
                return False
            declared_count = read_declared_count(f)
    except (OSError, ValueError) as e:
        logger.debug("sniff_unreadable", path=str(filename), error=str(e))
        return False

    return is_structurally_consistent(size, declared_count)


def classify(filename: Union[str, Path]) -> float:
    """Probability in [0, 1] that ``filename`` is a binary STL file.

    Never raises for malformed input. Files that are too short to hold the
    triangle count, or that cannot be opened at all, count as structurally
    inconsistent.

    Args:
        filename: Path to the file to sniff

    Returns:
        Probability that the file is a binary STL
    """
    prior = extension_prior(filename)
    consistent = _check_structure(filename)
    probability = update_probability(prior, consistent)

    logger.debug(
        "sniffed_binary_stl",
        path=str(filename),
        consistent=consistent,
        probability=probability,
    )
    return probability
