from enum import Enum
from typing import Union
import logging

from pydantic import BaseModel, ConfigDict, Field

from .builder import SelectorBuilder
from .exceptions import InvalidCombinatorError, SelectorValueError

logger = logging.getLogger(__name__)

class Combinator(Enum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

class CombinedSelector(BaseModel):
    """Immutable result of joining two selectors with a combinator."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(default="")

    def serialize(self) -> str:
        return self.text

    stringify = serialize

    def __str__(self) -> str:
        return self.text

Fragment = Union[SelectorBuilder, CombinedSelector, str]

def fragment_to_string(fragment: Fragment) -> str:
    """Resolve a builder, combined selector or plain string to selector text."""
    if isinstance(fragment, (SelectorBuilder, CombinedSelector)):
        return fragment.serialize()
    if isinstance(fragment, str):
        return fragment
    raise SelectorValueError(f"Cannot combine object of type {type(fragment).__name__}")

def resolve_combinator(token: Union[Combinator, str], strict: bool = True) -> str:
    """
    Normalize a combinator token.

    Surrounding whitespace is dropped from ``+``, ``~`` and ``>``; any
    non-empty whitespace-only token is the descendant combinator.

    Args:
        token: Combinator member or raw token string
        strict: Reject tokens that are not CSS combinators

    Returns:
        The normalized token

    Raises:
        InvalidCombinatorError: If strict and the token is not a combinator
    """
    if isinstance(token, Combinator):
        return token.value
    if not isinstance(token, str):
        raise InvalidCombinatorError(f"Combinator must be a string, got {token!r}")

    stripped = token.strip()
    if stripped in (Combinator.CHILD.value, Combinator.ADJACENT_SIBLING.value,
                    Combinator.GENERAL_SIBLING.value):
        return stripped
    if token and not stripped:
        return Combinator.DESCENDANT.value

    if strict:
        raise InvalidCombinatorError(
            f"Invalid combinator {token!r}; expected one of ' ', '+', '~', '>'"
        )
    logger.debug(f"Using non-standard combinator verbatim: {token!r}")
    return token

def combine(
    left: Fragment,
    token: Union[Combinator, str],
    right: Fragment,
    strict: bool = True
) -> CombinedSelector:
    """
    Join two selectors with a combinator.

    The token is always surrounded by single spaces, so the descendant
    combinator renders as three spaces.

    Example:
        >>> combine(SelectorBuilder().element('div'), '>', SelectorBuilder().element('p')).serialize()
        'div > p'
    """
    combinator = resolve_combinator(token, strict)
    return CombinedSelector(
        text=f"{fragment_to_string(left)} {combinator} {fragment_to_string(right)}"
    )
