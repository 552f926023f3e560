class InvalidArgument(ValueError):
    """Raised when a LongMap is constructed with an unusable argument."""


class InvalidCapacity(InvalidArgument):
    pass


class InvalidLoadFactor(InvalidArgument):
    pass
