from typing import Union

from .builder import SelectorBuilder, SelectorCategory
from .combinator import Combinator, CombinedSelector, Fragment, combine as _combine

class CssSelectorBuilder:
    """
    Entry points for building CSS selectors.

    Every category method starts a new SelectorBuilder, so independent chains
    never share state. The facade itself only carries configuration.

    Example:
        >>> builder = CssSelectorBuilder()
        >>> builder.id('main').class_('container').class_('editable').stringify()
        '#main.container.editable'
    """

    def __init__(self, strict_combinators: bool = True):
        self.strict_combinators = strict_combinators

    def _start(self, category: SelectorCategory, value: str) -> SelectorBuilder:
        return SelectorBuilder().apply(category, value)

    def element(self, value: str) -> SelectorBuilder:
        return self._start(SelectorCategory.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._start(SelectorCategory.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._start(SelectorCategory.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._start(SelectorCategory.ATTRIBUTE, value)

    attribute = attr

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._start(SelectorCategory.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._start(SelectorCategory.PSEUDO_ELEMENT, value)

    def combine(
        self,
        left: Fragment,
        combinator: Union[Combinator, str],
        right: Fragment
    ) -> CombinedSelector:
        """Join two selectors; returns a new CombinedSelector on every call."""
        return _combine(left, combinator, right, strict=self.strict_combinators)

css_selector_builder = CssSelectorBuilder()

element = css_selector_builder.element
id_ = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
