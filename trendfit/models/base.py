import abc

import numpy as np


class Model(metaclass=abc.ABCMeta):
    """Abstract base class for line models."""

    @abc.abstractmethod
    def fit(self, data):
        """Fits a model to the given data.

        Args:
            data: A numpy array of (x, y) data points.

        Returns:
            Arbitrary model parameters. These are passed as-is to
            get_residuals() and predict(). Degenerate data yields NaN or
            infinite parameters rather than an exception.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def predict(self, xs, fit):
        """Predicts results from a fitted model to the given data.

        Args:
            xs: A numpy array of input values.
            fit: The model parameters from model.fit().

        Returns:
            A numpy array of predicted values.
        """
        raise NotImplementedError

    def get_residuals(self, data, fit):
        """Calculates residuals between observed data and a fitted model.

        Args:
            data: A numpy array of observed data points.
            fit: The model parameters from model.fit().

        Returns:
            A numpy array of residuals, that is, the squared deviations of
            the observed values from the predicted values.
        """
        xs = data[:, 0]
        ys = data[:, 1]
        predicted_ys = self.predict(xs, fit)
        return (ys - predicted_ys) ** 2

    def r_squared(self, data):
        """Calculates the coefficient of determination of a fresh fit.

        The result is not clamped: it is negative when the line fits worse
        than the mean of y, and can exceed 1 for a forced intercept.

        Args:
            data: A numpy array of (x, y) data points.

        Returns:
            Float R². NaN for fewer than 2 data points. NaN or infinite
            when all y values are equal.
        """
        if len(data) < 2:
            return np.nan

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            model_fit = self.fit(data)
            residuals = self.get_residuals(data, model_fit)

            n = np.float64(len(data))
            sum_y = np.float64(0)
            sum_y_squared = np.float64(0)
            for y in data[:, 1]:
                sum_y += y
                sum_y_squared += y * y
            # Sequential, unlike np.sum, to keep results order-exact.
            sum_squared_errors = np.float64(0)
            for residual in residuals:
                sum_squared_errors += residual

            return float(
                1 - sum_squared_errors / (sum_y_squared - sum_y * sum_y / n))
