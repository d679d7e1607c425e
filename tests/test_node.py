# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for MarkupNode."""

import pytest

from genro_twiml import MarkupNode


class TestMarkupNode:
    """Tests for MarkupNode."""

    def test_create_empty_node(self):
        """Test a new node has a name and nothing else."""
        node = MarkupNode('Say')
        assert node.name == 'Say'
        assert node.text is None
        assert node.attributes == []
        assert node.children == []
        assert node.is_empty is True

    def test_empty_name_raises(self):
        """Test the name must be non-empty."""
        with pytest.raises(ValueError, match="non-empty"):
            MarkupNode('')

    def test_name_is_read_only(self):
        """Test the name cannot be reassigned."""
        node = MarkupNode('Say')
        with pytest.raises(AttributeError):
            node.name = 'Play'

    def test_push_attribute_keeps_order(self):
        """Test attributes keep insertion order."""
        node = MarkupNode('Gather')
        node.push_attribute('timeout', '5')
        node.push_attribute('action', '/go')
        node.push_attribute('method', 'POST')
        assert node.attributes == [
            ('timeout', '5'), ('action', '/go'), ('method', 'POST'),
        ]

    def test_push_attribute_accepts_anything(self):
        """Test empty names and values are stored verbatim."""
        node = MarkupNode('Say')
        node.push_attribute('', '')
        node.push_attribute('voice', 'a')
        node.push_attribute('voice', 'b')
        assert node.attributes == [('', ''), ('voice', 'a'), ('voice', 'b')]

    def test_append_child_keeps_order(self):
        """Test children keep insertion order."""
        node = MarkupNode('Response')
        first = MarkupNode('Say')
        second = MarkupNode('Record')
        node.append_child(first)
        node.append_child(second)
        assert node.children == [first, second]
        assert node.is_empty is False

    def test_set_text_replaces(self):
        """Test set_text replaces previous text."""
        node = MarkupNode('Say')
        node.set_text('one')
        node.set_text('two')
        assert node.text == 'two'
        assert node.is_empty is False

    def test_empty_text_is_not_empty_node(self):
        """Test an empty string still counts as text."""
        node = MarkupNode('Say')
        node.set_text('')
        assert node.is_empty is False

    def test_get_attr(self):
        """Test get_attr returns the first match or the default."""
        node = MarkupNode('Say')
        node.push_attribute('voice', 'alice')
        assert node.get_attr('voice') == 'alice'
        assert node.get_attr('language') is None
        assert node.get_attr('language', 'en-US') == 'en-US'

    def test_copy_is_shallow(self):
        """Test copy gets its own lists but shares child nodes."""
        child = MarkupNode('Say')
        node = MarkupNode('Response')
        node.push_attribute('a', '1')
        node.append_child(child)

        clone = node.copy()
        clone.push_attribute('b', '2')
        clone.append_child(MarkupNode('Hangup'))

        assert node.attributes == [('a', '1')]
        assert len(node.children) == 1
        assert clone.children[0] is child
        assert clone.name == 'Response'

    def test_repr(self):
        """Test string representation."""
        node = MarkupNode('Say')
        node.set_text('Hello')
        assert 'Say' in repr(node)
        assert 'Hello' in repr(node)
