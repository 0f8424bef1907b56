class SelectorError(Exception):
    """Base selector builder error."""
    pass

class DuplicateError(SelectorError):
    """Element, id or pseudo-element set more than once."""

    def __init__(self, message: str = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )):
        super().__init__(message)

class OrderError(SelectorError):
    """Selector parts added out of canonical order."""

    def __init__(self, message: str = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )):
        super().__init__(message)

class InvalidCombinatorError(SelectorError):
    """Unknown combinator token."""
    pass

class SelectorValueError(SelectorError):
    """Empty or non-string selector value."""
    pass

class ParseError(Exception):
    """Error parsing input data."""
    pass
