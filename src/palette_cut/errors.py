from __future__ import annotations


class QuantizationError(ValueError):
    pass


class InvalidTargetCountError(QuantizationError):
    pass


class EmptyInputError(QuantizationError):
    pass
