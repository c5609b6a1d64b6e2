class InvariantViolation(ValueError):
    """A color was built or modified in a way that breaks one of its invariants.

    Raised for programming errors only (out-of-range chromaticities, short
    flatten slices, integer channels outside their format); it is never used to
    report an out-of-gamut conversion result.
    """


class UndefinedConversionError(ValueError):
    """No conversion route exists between two color spaces."""

    def __init__(self, from_space: str, to_space: str):
        super().__init__(f"Conversion from {from_space} to {to_space} is not defined")
        self.from_space = from_space
        self.to_space = to_space
