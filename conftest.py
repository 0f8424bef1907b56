import pytest
from css_selector_builder import CssSelectorBuilder

@pytest.fixture
def builder():
    """Return a strict CssSelectorBuilder facade."""
    return CssSelectorBuilder()

@pytest.fixture
def permissive_builder():
    """Return a facade that inserts unknown combinators verbatim."""
    return CssSelectorBuilder(strict_combinators=False)
