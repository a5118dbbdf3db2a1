from fractions import Fraction
from typing import List, Tuple

import numpy as np
from matplotlib.axes import Axes


def _pi_label(factor: Fraction) -> str:
    sign = "-" if factor < 0 else ""
    abs_numerator = abs(factor.numerator)
    if abs_numerator == 0:
        numerator_string = "0"
    elif abs_numerator == 1:
        numerator_string = "π"
    else:
        numerator_string = f"{abs_numerator} π"

    if factor.denominator == 1:
        return f"{sign}{numerator_string}"
    return f"{sign}{numerator_string} / {factor.denominator}"


def pi_axis_labels(
    min_value: float, max_value: float, step: Fraction = Fraction(1, 2)
) -> Tuple[List[float], List[str]]:
    """
    Generates lists of tick locations and tick labels for an axis labelled in (fractional) multiples
    of π, e.g. ([-π / 2, 0.0, π / 2], ["-π / 2", "0", "π / 2"]).
    """
    step = Fraction(step)
    first, last = (int(np.round(bound / (np.pi * step))) for bound in (min_value, max_value))
    locs = []
    labels = []
    for k in range(first, last + 1):
        factor = k * step
        locs.append(float(factor) * np.pi)
        labels.append(_pi_label(factor))
    return locs, labels


def set_pi_axis_labels(axes: Axes, min_value: float, max_value: float, step: Fraction = Fraction(1, 2)) -> None:
    """
    Places ticks and labels on both axes in the given range, spaced by multiples of π.
    """
    locs, labels = pi_axis_labels(min_value, max_value, step)
    axes.set_xticks(locs, labels)
    axes.set_yticks(locs, labels)
