"""
Base class for the immutable CSS value objects.
"""


class ImmutableValue:
    """
    Value object whose attributes are set once, in __init__.

    Subclasses declare their fields in __slots__ and assign them with
    _init_attr(); any later assignment or deletion raises AttributeError.
    """

    __slots__ = ()

    def _init_attr(self, name: str, value) -> None:
        object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")
