from enum import Enum
from typing import List, Optional, Tuple
from dataclasses import dataclass, field
import logging

from .exceptions import DuplicateError, OrderError, SelectorValueError

logger = logging.getLogger(__name__)

class SelectorCategory(Enum):
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def rank(self) -> int:
        return self.value

    @property
    def unique(self) -> bool:
        """Whether the category may occur only once in a compound selector."""
        return self in _UNIQUE_CATEGORIES

_UNIQUE_CATEGORIES = frozenset({
    SelectorCategory.ELEMENT,
    SelectorCategory.ID,
    SelectorCategory.PSEUDO_ELEMENT,
})

@dataclass
class SelectorState:
    element: Optional[str] = None
    id: Optional[str] = None
    classes: List[str] = field(default_factory=list)
    attributes: List[str] = field(default_factory=list)
    pseudo_classes: List[str] = field(default_factory=list)
    pseudo_element: Optional[str] = None
    last_rank: int = 0

class SelectorBuilder:
    """
    Fluent builder for a single compound selector.

    Components must be added in the order
    element, id, class, attribute, pseudo-class, pseudo-element.
    Element, id and pseudo-element may only be set once.

    Example:
        >>> SelectorBuilder().element('a').attr('href$=".png"').pseudo_class('focus').serialize()
        'a[href$=".png"]:focus'
    """

    def __init__(self, state: Optional[SelectorState] = None):
        self.state = state or SelectorState()

    def _check(self, category: SelectorCategory, value: str, already_set: bool = False) -> None:
        if not isinstance(value, str) or not value:
            raise SelectorValueError(
                f"{category.name.lower()} value must be a non-empty string, got {value!r}"
            )
        if already_set:
            logger.debug(f"Rejected duplicate {category.name.lower()}: {value}")
            raise DuplicateError()
        if self.state.last_rank > category.rank:
            logger.debug(
                f"Rejected {category.name.lower()} {value!r} after rank {self.state.last_rank}"
            )
            raise OrderError()

    def set_element(self, name: str) -> "SelectorBuilder":
        self._check(SelectorCategory.ELEMENT, name, self.state.element is not None)
        self.state.element = name
        self.state.last_rank = SelectorCategory.ELEMENT.rank
        return self

    def set_id(self, name: str) -> "SelectorBuilder":
        self._check(SelectorCategory.ID, name, self.state.id is not None)
        self.state.id = name
        self.state.last_rank = SelectorCategory.ID.rank
        return self

    def add_class(self, name: str) -> "SelectorBuilder":
        self._check(SelectorCategory.CLASS, name)
        self.state.classes.append(name)
        self.state.last_rank = SelectorCategory.CLASS.rank
        return self

    def add_attribute(self, expr: str) -> "SelectorBuilder":
        """Append an attribute expression, stored verbatim without brackets."""
        self._check(SelectorCategory.ATTRIBUTE, expr)
        self.state.attributes.append(expr)
        self.state.last_rank = SelectorCategory.ATTRIBUTE.rank
        return self

    def add_pseudo_class(self, name: str) -> "SelectorBuilder":
        self._check(SelectorCategory.PSEUDO_CLASS, name)
        self.state.pseudo_classes.append(name)
        self.state.last_rank = SelectorCategory.PSEUDO_CLASS.rank
        return self

    def set_pseudo_element(self, name: str) -> "SelectorBuilder":
        self._check(
            SelectorCategory.PSEUDO_ELEMENT, name, self.state.pseudo_element is not None
        )
        self.state.pseudo_element = name
        self.state.last_rank = SelectorCategory.PSEUDO_ELEMENT.rank
        return self

    # Fluent names
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    attribute = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    def apply(self, category: SelectorCategory, value: str) -> "SelectorBuilder":
        """Apply a category by enum member; used by the facade entry points."""
        setters = {
            SelectorCategory.ELEMENT: self.set_element,
            SelectorCategory.ID: self.set_id,
            SelectorCategory.CLASS: self.add_class,
            SelectorCategory.ATTRIBUTE: self.add_attribute,
            SelectorCategory.PSEUDO_CLASS: self.add_pseudo_class,
            SelectorCategory.PSEUDO_ELEMENT: self.set_pseudo_element,
        }
        return setters[category](value)

    def serialize(self) -> str:
        """
        Render the compound selector.

        Returns:
            ``element#id.class[attr]:pseudoClass::pseudoElement`` with absent
            parts omitted, or an empty string for an untouched builder.
        """
        state = self.state
        result = ""
        if state.element:
            result += state.element
        if state.id:
            result += f"#{state.id}"
        if state.classes:
            result += "." + ".".join(state.classes)
        result += "".join(f"[{attribute}]" for attribute in state.attributes)
        if state.pseudo_classes:
            result += ":" + ":".join(state.pseudo_classes)
        if state.pseudo_element:
            result += f"::{state.pseudo_element}"
        return result

    stringify = serialize

    def specificity(self) -> Tuple[int, int, int]:
        """
        Calculate the specificity of the compound selector.

        Returns:
            Tuple of (id_count, class_count, element_count), where class_count
            includes attributes and pseudo-classes and element_count includes
            the pseudo-element. The universal selector ``*`` counts for nothing.
        """
        state = self.state
        id_count = 1 if state.id else 0
        class_count = len(state.classes) + len(state.attributes) + len(state.pseudo_classes)
        element_count = 1 if state.element and state.element != "*" else 0
        if state.pseudo_element:
            element_count += 1
        return (id_count, class_count, element_count)

    def copy(self) -> "SelectorBuilder":
        """Return an independent builder with the same components."""
        state = self.state
        return SelectorBuilder(SelectorState(
            element=state.element,
            id=state.id,
            classes=list(state.classes),
            attributes=list(state.attributes),
            pseudo_classes=list(state.pseudo_classes),
            pseudo_element=state.pseudo_element,
            last_rank=state.last_rank,
        ))

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.serialize()!r})"
