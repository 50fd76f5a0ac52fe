# Information gain criterion for scoring the labels reaching a tree node.
import numpy as np
from typing import Union, Callable, Iterable


def evaluate_unweighted(labels: Union[Iterable, np.ndarray],
                        num_classes: int,
                        weights=None) -> float:

    labels = np.asarray(labels)
    # edge case: an empty node is considered pure
    if labels.size == 0:
        return 0.0

    counts = np.bincount(labels, minlength=num_classes)

    # 0 * log2(0) is taken to be 0, so classes with no points are skipped
    frequencies = counts[counts > 0] / labels.size

    return float(np.sum(frequencies * np.log2(frequencies)))


def evaluate_weighted(labels: Union[Iterable, np.ndarray],
                      num_classes: int,
                      weights: Union[Iterable, np.ndarray]) -> float:

    labels = np.asarray(labels)
    if labels.size == 0:
        return 0.0

    weights = np.asarray(weights, dtype=float)
    weighted_counts = np.bincount(labels, weights=weights, minlength=num_classes)
    # total taken from the accumulator so a pure set gives a frequency of exactly 1
    total_weight = weighted_counts.sum()

    # corner case: no weight at all, nothing to measure
    if total_weight == 0.0:
        return 0.0

    frequencies = weighted_counts[weighted_counts > 0] / total_weight

    return float(np.sum(frequencies * np.log2(frequencies)))


def evaluator(use_weights: bool) -> Callable:
    # resolve the mode once, outside the caller's loop
    if use_weights:
        return evaluate_weighted
    else:
        return evaluate_unweighted


def evaluate(labels: Union[Iterable, np.ndarray],
             num_classes: int,
             weights: Union[None, Iterable, np.ndarray] = None,
             use_weights: bool = False) -> float:
    # sum of f * log2(f) over class frequencies; inputs are trusted, see evaluate_checked
    return evaluator(use_weights)(labels, num_classes, weights)


def evaluate_checked(labels: Union[Iterable, np.ndarray],
                     num_classes: int,
                     weights: Union[None, Iterable, np.ndarray] = None,
                     use_weights: bool = False) -> float:
    # same as evaluate, but refuses inputs outside the evaluate contract

    if num_classes < 1:
        raise ValueError(f"num_classes must be a positive integer, got {num_classes}")

    labels = np.asarray(labels)
    if labels.ndim != 1:
        raise ValueError(f"labels must be one-dimensional, got shape {labels.shape}")
    if labels.size > 0:
        if not np.issubdtype(labels.dtype, np.integer):
            raise ValueError(f"labels must be integers, got dtype {labels.dtype}")
        if labels.min() < 0 or labels.max() >= num_classes:
            raise ValueError(f"labels must lie in [0, {num_classes}), "
                             f"got values in [{labels.min()}, {labels.max()}]")

    if use_weights:
        if weights is None:
            raise ValueError("weights are required when use_weights is True")
        weights = np.asarray(weights, dtype=float)
        if weights.shape != labels.shape:
            raise ValueError(f"weights must have the same length as labels, "
                             f"got {weights.size} weights for {labels.size} labels")
        if not np.all(np.isfinite(weights)) or np.any(weights < 0):
            raise ValueError("weights must be finite and non-negative")

    return evaluate(labels, num_classes, weights=weights, use_weights=use_weights)


def gain_range(num_classes: int) -> float:
    # best case is a pure set (0), worst case an even spread over all
    # classes, n * (1/n * log2(1/n)) = -log2(n). So the range is log2(n).
    return float(np.log2(num_classes))
