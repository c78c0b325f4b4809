"""Warning classes for root finding module."""


class ConvergenceWarning(RuntimeWarning):
    """Issued when a root estimate does not reproduce its target value.

    The estimate is still returned; the warning only flags that at least one
    element of the call exceeded the residual tolerance.
    """

    pass
