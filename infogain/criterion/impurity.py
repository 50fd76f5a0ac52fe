import logging
import numpy as np
from typing import Union, Iterable

from infogain.criterion import information_gain


def children_gain(child_labels: Iterable,
                  num_classes: int,
                  child_weights: Union[None, Iterable] = None,
                  use_weights: bool = False) -> float:

    # each child counts proportionally to its number of points (or its weight)
    evaluate = information_gain.evaluator(use_weights)
    child_labels = [np.asarray(labels) for labels in child_labels]

    if use_weights:
        if child_weights is None:
            raise ValueError("child_weights are required when use_weights is True")
        child_weights = [np.asarray(weights, dtype=float) for weights in child_weights]
        if len(child_weights) != len(child_labels):
            raise ValueError(f"Expected one weight vector per child, "
                             f"got {len(child_weights)} for {len(child_labels)} children")
        child_sizes = np.array([weights.sum() for weights in child_weights])
    else:
        child_weights = [None] * len(child_labels)
        child_sizes = np.array([labels.size for labels in child_labels], dtype=float)

    total_size = child_sizes.sum()
    if total_size == 0:
        return 0.0

    gain = 0.0
    for labels, weights, size in zip(child_labels, child_weights, child_sizes):
        if size > 0:
            gain += (size / total_size) * evaluate(labels, num_classes, weights)

    return float(gain)


def gain_improvement(labels: Iterable,
                     child_labels: Iterable,
                     num_classes: int,
                     weights: Union[None, Iterable] = None,
                     child_weights: Union[None, Iterable] = None,
                     use_weights: bool = False) -> float:

    parent_gain = information_gain.evaluate(labels, num_classes, weights=weights, use_weights=use_weights)
    split_gain = children_gain(child_labels, num_classes, child_weights=child_weights, use_weights=use_weights)
    logging.debug(f"parent gain: {parent_gain}, children gain: {split_gain}")

    return split_gain - parent_gain


def normalized_gain(gain: Union[float, np.ndarray], num_classes: int) -> Union[float, np.ndarray]:

    gain_range = information_gain.gain_range(num_classes)
    # a single class problem has nothing to normalize against
    if gain_range == 0.0:
        return np.zeros_like(gain, dtype=float) if isinstance(gain, np.ndarray) else 0.0

    return np.divide(gain, gain_range)
