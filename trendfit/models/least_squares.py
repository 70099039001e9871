import numpy as np

from trendfit import samples
from trendfit.models.base import Model


class LeastSquaresModel(Model):
    """Ordinary least squares line, y = slope * x + intercept.

    With a forced intercept only the slope is solved for.
    """

    def __init__(self, forced_intercept=None):
        """Constructor.

        Args:
            forced_intercept: Optional float. The line is constrained to
                cross the y axis here. None fits the intercept as well.

        Raises:
            ValueError, if forced_intercept is not finite.
        """
        self.forced_intercept = samples.validate_forced_intercept(
            forced_intercept)

    def fit(self, data):
        """Solves for (slope, intercept) in closed form.

        Sums are accumulated point by point in input order, so results
        are reproducible bit for bit. There is no divide-by-zero guard:
        constant x values give NaN or infinite parameters.

        Args:
            data: A numpy array of (x, y) data points.

        Returns:
            Tuple of numpy float64 slope, intercept. Both NaN for fewer
            than 2 data points.
        """
        if len(data) < 2:
            return np.nan, np.nan

        n = np.float64(len(data))
        sum_x = np.float64(0)
        sum_y = np.float64(0)
        sum_xy = np.float64(0)
        sum_x_squared = np.float64(0)
        for x, y in data:
            sum_x += x
            sum_y += y
            sum_xy += x * y
            sum_x_squared += x * x

        with np.errstate(divide='ignore', invalid='ignore'):
            if self.forced_intercept is None:
                slope = ((n * sum_xy - sum_x * sum_y) /
                         (n * sum_x_squared - sum_x * sum_x))
                intercept = (sum_y - slope * sum_x) / n
            else:
                intercept = np.float64(self.forced_intercept)
                slope = (sum_xy - intercept * sum_x) / sum_x_squared
        return slope, intercept

    def predict(self, xs, model_fit):
        predicted_ys = model_fit[0] * xs + model_fit[1]
        return predicted_ys
