# css_selector_builder/__init__.py
from .builder import SelectorBuilder, SelectorCategory, SelectorState
from .combinator import Combinator, CombinedSelector, combine, resolve_combinator
from .facade import CssSelectorBuilder, css_selector_builder
from .objects import Rectangle, get_json, from_json
from .exceptions import (
    SelectorError,
    DuplicateError,
    OrderError,
    InvalidCombinatorError,
    SelectorValueError,
    ParseError
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SelectorBuilder",
    "SelectorCategory",
    "SelectorState",
    "CombinedSelector",
    "Combinator",
    "CssSelectorBuilder",
    "css_selector_builder",

    # Functions
    "combine",
    "resolve_combinator",

    # Object helpers
    "Rectangle",
    "get_json",
    "from_json",

    # Exceptions
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "InvalidCombinatorError",
    "SelectorValueError",
    "ParseError"
]
