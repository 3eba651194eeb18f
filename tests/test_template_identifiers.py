"""
Tests for instance id allocation.
"""
from core.template.builder import Element
from core.template.identifiers import IdentifierAllocator


class TestIdentifierAllocator:
    """Test the IdentifierAllocator class."""

    def test_sequential_ids_start_at_zero(self):
        allocator = IdentifierAllocator()
        assert allocator.identifier_for(object()) == "0"
        assert allocator.identifier_for(object()) == "1"
        assert allocator.identifier_for(object()) == "2"

    def test_same_key_same_id(self):
        allocator = IdentifierAllocator()
        key = Element("Box")
        first = allocator.identifier_for(key)
        allocator.identifier_for(Element("Box"))
        assert allocator.identifier_for(key) == first
        assert len(allocator) == 2

    def test_equal_looking_elements_are_distinct(self):
        allocator = IdentifierAllocator()
        assert allocator.identifier_for(Element("Box")) != allocator.identifier_for(Element("Box"))

    def test_explicit_id_is_honored(self):
        allocator = IdentifierAllocator()
        key = Element("Box")
        assert allocator.identifier_for(key, explicit="hero") == "hero"
        # Later lookups do not re-synthesize
        assert allocator.identifier_for(key) == "hero"
        assert key in allocator

    def test_synthesized_ids_skip_reserved(self):
        allocator = IdentifierAllocator(reserved=["0", "2"])
        assert allocator.identifier_for(object()) == "1"
        assert allocator.identifier_for(object()) == "3"

    def test_explicit_numeric_id_reserves_value(self):
        allocator = IdentifierAllocator()
        allocator.identifier_for(Element("Box"), explicit="1")
        assert allocator.identifier_for(object()) == "0"
        assert allocator.identifier_for(object()) == "2"

    def test_allocators_do_not_share_state(self):
        key = Element("Box")
        assert IdentifierAllocator().identifier_for(key) == "0"
        other = IdentifierAllocator()
        other.identifier_for(object())
        assert other.identifier_for(key) == "1"
