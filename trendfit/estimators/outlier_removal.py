import enum
import logging
import numbers

import numpy as np

from trendfit import samples

logger = logging.getLogger(__name__)

# A fit with at least this R² is accepted without removing anything further.
DEFAULT_R2_THRESHOLD = 0.95


class StopReason(enum.Enum):
    """Why an outlier search stopped."""
    TOO_FEW_SAMPLES = 'too_few_samples'
    THRESHOLD_MET = 'threshold_met'
    BUDGET_EXHAUSTED = 'budget_exhausted'
    NO_IMPROVEMENT = 'no_improvement'
    # R² is NaN (e.g. all y equal), so it can't be compared to the threshold.
    UNDEFINED_R2 = 'undefined_r2'


class GreedyOutlierRemoval(object):
    """Greedy single-point outlier removal.

    Each round fits the model once per data point, leaving that point out,
    and drops the point whose absence raises R² the most. Rounds repeat
    until the fit is good enough, the removal budget runs out, or no single
    removal improves R² any further.
    """

    def __init__(self, model, max_outliers, r2_threshold=DEFAULT_R2_THRESHOLD):
        """Constructor.

        Args:
            model: A Model subclass instance, used to fit and score the data.
            max_outliers: Integer, the most data points that may be removed.
                0 disables removal.
            r2_threshold: Float, a fit with at least this R² is accepted
                as is.

        Raises:
            ValueError, if max_outliers is not a non-negative integer.
        """
        if not isinstance(max_outliers, numbers.Integral) or max_outliers < 0:
            raise ValueError('max_outliers must be a non-negative integer.')
        self.model = model
        self.max_outliers = max_outliers
        self.r2_threshold = r2_threshold

    def fit_with_outlier_removal(self, data):
        """Runs the outlier search.

        Args:
            data: Sequence of (x, y) pairs or an (n, 2) numpy array. It is
                copied, never modified.

        Returns:
            OutlierRemovalResult instance.

        Raises:
            ValueError, if data is not shaped as (x, y) pairs.
        """
        data = samples.as_samples(data)
        if len(data) < 2:
            logger.debug('Too few samples to fit: %d', len(data))
            return OutlierRemovalResult(
                (np.nan, np.nan), np.nan, data, [], StopReason.TOO_FEW_SAMPLES)

        original_indexes = np.arange(len(data))
        model_fit, r2, removed_indexes, stop_reason = self._search(
            data, original_indexes, self.max_outliers)
        logger.debug('Outlier search stopped (%s) with R2 %.4f, removed %s',
                     stop_reason.value, r2, removed_indexes)
        return OutlierRemovalResult(
            model_fit, r2, data, removed_indexes, stop_reason)

    def _search(self, data, original_indexes, max_outliers):
        """Fits the data, removing one outlier and recursing if worthwhile.

        Args:
            data: Numpy array of the data points still in play.
            original_indexes: Numpy int array, parallel to data, holding
                each point's position in the caller's input.
            max_outliers: Integer, remaining removal budget.

        Returns:
            Tuple of:
                Model fit for the final data.
                R² of that fit.
                List of removed original indexes, innermost removal first.
                StopReason.
        """
        model_fit = self.model.fit(data)
        r2 = self.model.r_squared(data)
        logger.debug('Baseline R2 %.4f over %d samples', r2, len(data))

        if np.isnan(r2):
            return model_fit, r2, [], StopReason.UNDEFINED_R2
        if r2 >= self.r2_threshold:
            return model_fit, r2, [], StopReason.THRESHOLD_MET
        if max_outliers <= 0:
            return model_fit, r2, [], StopReason.BUDGET_EXHAUSTED

        outlier, outlier_r2 = self._find_outlier(data, r2)
        if outlier is None:
            return model_fit, r2, [], StopReason.NO_IMPROVEMENT

        removed_index = int(original_indexes[outlier])
        logger.debug('Removing sample %d (%s), R2 now %.4f',
                     removed_index, data[outlier].tolist(), outlier_r2)
        model_fit, r2, removed_indexes, stop_reason = self._search(
            np.delete(data, outlier, axis=0),
            np.delete(original_indexes, outlier),
            max_outliers - 1)
        removed_indexes.append(removed_index)
        return model_fit, r2, removed_indexes, stop_reason

    def _find_outlier(self, data, baseline_r2):
        """Finds the data point whose removal improves R² the most.

        Args:
            data: Numpy array of data points.
            baseline_r2: R² of the model fitted to all of data.

        Returns:
            Tuple of the position of the outlier in data and the R² without
            it, or (None, baseline_r2) if no removal beats the baseline.
            Ties go to the earliest position.
        """
        best_position = None
        best_r2 = baseline_r2
        for position in range(len(data)):
            trial_r2 = self.model.r_squared(np.delete(data, position, axis=0))
            if trial_r2 > best_r2:
                best_position = position
                best_r2 = trial_r2
        return best_position, best_r2


class OutlierRemovalResult(object):
    """Stores the outcome of an outlier search."""

    def __init__(self, model_fit, r2, data, removed_indexes, stop_reason):
        """Constructor.

        Args:
            model_fit: (slope, intercept) fitted to the retained data.
            r2: R² of that fit.
            data: Numpy array of the original data points.
            removed_indexes: List of removed positions in data, innermost
                removal first.
            stop_reason: StopReason.
        """
        self.fit = model_fit
        self.r2 = r2
        self.data = data
        self.removed_indexes = removed_indexes
        self.stop_reason = stop_reason

    @property
    def slope(self):
        return float(self.fit[0])

    @property
    def intercept(self):
        return float(self.fit[1])

    @property
    def _outlier_mask(self):
        mask = np.zeros(len(self.data), dtype=bool)
        mask[np.array(self.removed_indexes, dtype=int)] = True
        return mask

    @property
    def inliers(self):
        return self.data[~self._outlier_mask]

    @property
    def outliers(self):
        return self.data[self._outlier_mask]

    def as_tuple(self):
        """Returns (slope, intercept, r2, removed_indexes) as plain Python values."""
        return (self.slope, self.intercept, float(self.r2),
                list(self.removed_indexes))

    def __eq__(self, other):
        if isinstance(other, OutlierRemovalResult):
            return (np.array_equal(self.fit, other.fit, equal_nan=True) and
                    np.array_equal(self.r2, other.r2, equal_nan=True) and
                    np.array_equal(self.data, other.data) and
                    self.removed_indexes == other.removed_indexes and
                    self.stop_reason == other.stop_reason)
        return False

    def __hash__(self):
        return hash((tuple(self.removed_indexes), self.stop_reason))
