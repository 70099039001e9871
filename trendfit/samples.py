import math

import numpy as np


def as_samples(samples):
    """Coerces samples to a float array of (x, y) rows.

    Args:
        samples: A sequence of (x, y) pairs or an (n, 2) numpy array.
            May be empty.

    Returns:
        A new (n, 2) float numpy array. Column 0 holds x, column 1 holds y.
        The caller's object is never modified.

    Raises:
        ValueError, if the samples are not shaped as (x, y) pairs.
    """
    data = np.array(samples, dtype=float)
    if data.ndim == 1 and data.size == 0:
        return data.reshape((0, 2))
    if data.ndim != 2 or data.shape[1] != 2:
        raise ValueError('Samples must be (x, y) pairs, got shape {}.'.format(
            data.shape))
    return data


def validate_forced_intercept(forced_intercept):
    """Checks a forced intercept.

    Returns:
        None for a free intercept, else the intercept as a float.

    Raises:
        ValueError, if the intercept is not a finite number.
    """
    if forced_intercept is None:
        return None
    forced_intercept = float(forced_intercept)
    if not math.isfinite(forced_intercept):
        raise ValueError('forced_intercept must be finite, or None to fit it.')
    return forced_intercept
