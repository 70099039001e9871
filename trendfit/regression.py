"""Trend line fitting with optional greedy outlier removal.

Degenerate input is reported through NaN or infinite values, never raised:
fewer than 2 samples gives NaN for everything, constant x values give a
NaN or infinite slope, and constant y values give a NaN or infinite R².
Check results with math.isnan() before use.
"""
from trendfit.estimators import outlier_removal
from trendfit.models import least_squares


def simple_fit(samples):
    """Fits a line with a free intercept and no outlier removal.

    Args:
        samples: Sequence of (x, y) pairs or an (n, 2) numpy array.

    Returns:
        Tuple of floats (slope, intercept, r2).
    """
    slope, intercept, r2, _ = fit(samples, 0)
    return slope, intercept, r2


def fit(samples, max_outliers=0, forced_intercept=None,
        r2_threshold=outlier_removal.DEFAULT_R2_THRESHOLD):
    """Fits a line, discarding up to max_outliers of the worst samples.

    Args:
        samples: Sequence of (x, y) pairs or an (n, 2) numpy array.
            Not modified.
        max_outliers: Integer, the most samples that may be removed.
        forced_intercept: Optional float to pin the intercept to. None
            fits it.
        r2_threshold: Float, stop removing samples once R² reaches this.

    Returns:
        Tuple of (slope, intercept, r2, removed_indexes). removed_indexes
        is a list of positions in samples, innermost removal first. It is
        empty if nothing was removed. It only holds removed samples, so a
        search that stopped because no removal improved R² looks the same
        as one that ran out of budget; use
        outlier_removal.GreedyOutlierRemoval directly to get the stop_reason.

    Raises:
        ValueError, for malformed samples, a max_outliers that is not a
        non-negative integer, or a non-finite forced_intercept.
    """
    model = least_squares.LeastSquaresModel(forced_intercept=forced_intercept)
    estimator = outlier_removal.GreedyOutlierRemoval(
        model, max_outliers, r2_threshold=r2_threshold)
    return estimator.fit_with_outlier_removal(samples).as_tuple()
