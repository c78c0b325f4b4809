from ._regularized_gamma_inverse import regularized_gamma_inverse

__all__ = [
    "regularized_gamma_inverse",
]
