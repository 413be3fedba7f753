class TreeError(Exception):
    """Base class for errors raised by the tree containers."""


class InvalidElementKindError(TreeError, TypeError):
    def __init__(self, element: object) -> None:
        super().__init__(f"{type(element).__name__} does not support ordering comparison")
        self.element = element


class ElementNotFoundError(TreeError, KeyError):
    def __init__(self, target: object) -> None:
        super().__init__(target)
        self.target = target


class EmptyTreeError(TreeError, ValueError):
    pass
