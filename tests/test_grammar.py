# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the element grammar: tag specs, Attribute and @element."""

import pytest

from genro_twiml import (
    Attribute,
    InvalidAttributeError,
    Method,
    NO_TEXT,
    REQUIRED_TEXT,
    Say,
    get_element,
)
from genro_twiml.grammar import (
    _parse_tag_spec,
    element,
    element_for_method,
    is_attribute_method,
    registered_tags,
)


class TestParseTagSpec:
    """Tests for _parse_tag_spec."""

    def test_plain_tag(self):
        assert _parse_tag_spec('Say') == ('Say', 0, None)

    def test_exact(self):
        assert _parse_tag_spec('Sip[1]') == ('Sip', 1, 1)

    def test_at_least(self):
        assert _parse_tag_spec('Number[1:]') == ('Number', 1, None)

    def test_at_most(self):
        assert _parse_tag_spec('Media[:10]') == ('Media', 0, 10)

    def test_range(self):
        assert _parse_tag_spec('Body[0:1]') == ('Body', 0, 1)

    def test_strips_whitespace(self):
        assert _parse_tag_spec('  Say ') == ('Say', 0, None)

    def test_invalid_spec_raises(self):
        with pytest.raises(ValueError, match="Invalid tag specification"):
            _parse_tag_spec('1Say')

    def test_empty_brackets_raise(self):
        with pytest.raises(ValueError, match="empty brackets"):
            _parse_tag_spec('Sip[]')

    def test_max_below_min_raises(self):
        with pytest.raises(ValueError, match="max < min"):
            _parse_tag_spec('Say[3:1]')


class TestAttributeFormat:
    """Tests for Attribute.format value kinds."""

    def test_str(self):
        assert Attribute('voice').format('alice', 'Say') == 'alice'

    def test_str_rejects_non_string(self):
        with pytest.raises(InvalidAttributeError, match="'voice' of 'Say'"):
            Attribute('voice').format(3, 'Say')

    def test_str_rejects_enum_member(self):
        """Test a plain attribute does not take tokens of an unrelated enum."""
        with pytest.raises(InvalidAttributeError, match="'voice' of 'Say' expects a string"):
            Attribute('voice').format(Method.GET, 'Say')

    @pytest.mark.parametrize('value', ['a\x00', '\udc80', '\ufffe'])
    def test_str_rejects_unrepresentable(self, value):
        with pytest.raises(InvalidAttributeError, match="cannot contain"):
            Attribute('voice').format(value, 'Say')

    def test_str_keeps_control_characters(self):
        """Test control characters other than NUL are left for the serializer."""
        assert Attribute('voice').format('a\x07', 'Say') == 'a\x07'

    def test_bool_literals(self):
        attribute = Attribute('muted', bool)
        assert attribute.format(True, 'Conference') == 'true'
        assert attribute.format(False, 'Conference') == 'false'

    def test_bool_rejects_int(self):
        with pytest.raises(InvalidAttributeError, match="expects a bool"):
            Attribute('muted', bool).format(0, 'Conference')

    def test_int(self):
        attribute = Attribute('timeout', int)
        assert attribute.format(0, 'Gather') == '0'
        assert attribute.format(30, 'Gather') == '30'

    def test_int_accepts_digit_string(self):
        assert Attribute('numDigits', int).format('1', 'Gather') == '1'

    @pytest.mark.parametrize('value', [True, -1, 1.5, '', 'one', '-1', None])
    def test_int_rejects(self, value):
        with pytest.raises(InvalidAttributeError, match="non-negative integer"):
            Attribute('timeout', int).format(value, 'Gather')

    def test_enum_member_and_token(self):
        attribute = Attribute('method', Method)
        assert attribute.format(Method.POST, 'Gather') == 'POST'
        assert attribute.format('GET', 'Gather') == 'GET'

    def test_enum_rejects_unknown_token(self):
        with pytest.raises(InvalidAttributeError, match="one of 'GET', 'POST'"):
            Attribute('method', Method).format('PUT', 'Gather')

    def test_set_name_defaults_xml_name(self):
        """Test the XML name defaults to the field name."""
        attribute = Say.__dict__['voice']
        assert attribute.name == 'voice'
        assert attribute.method_name == 'voice'

    def test_class_access_returns_descriptor(self):
        assert isinstance(Say.voice, Attribute)


class TestElementDecorator:
    """Tests for the @element decorator and the registry."""

    def test_declared_grammar(self):
        """Test the decorator stores tag, text mode and children."""
        gather = get_element('Gather')
        assert gather.tag == 'Gather'
        assert gather.text_mode == NO_TEXT
        assert gather._valid_children == frozenset({'Say', 'Play', 'Pause'})
        assert get_element('Say').text_mode == REQUIRED_TEXT

    def test_cardinality(self):
        message = get_element('Message')
        assert message._child_cardinality == {'Body': (0, 1), 'Media': (0, 10)}
        assert get_element('Refer')._child_cardinality == {'Sip': (1, 1)}

    def test_attributes_collected_by_method_name(self):
        gather = get_element('Gather')
        assert gather._attributes['num_digits'].name == 'numDigits'
        assert 'action' in gather._attributes

    def test_invalid_text_mode_raises(self):
        with pytest.raises(ValueError, match="Invalid text mode"):
            element(text='sometimes')

    def test_unknown_tag(self):
        assert get_element('Speak') is None

    def test_element_for_method(self):
        assert element_for_method('say') is Say
        assert element_for_method('voice') is None

    def test_is_attribute_method(self):
        assert is_attribute_method('num_digits') is True
        assert is_attribute_method('from_') is True
        assert is_attribute_method('say') is False

    def test_catalogue_registered(self):
        tags = set(registered_tags())
        assert {
            'Response', 'Say', 'Play', 'Pause', 'Gather', 'Redirect', 'Hangup',
            'Reject', 'Record', 'Dial', 'Number', 'Client', 'Conference', 'Sip',
            'Queue', 'Sms', 'Message', 'Body', 'Media', 'Enqueue', 'Leave',
            'Connect', 'Stream', 'Room', 'Pay', 'Prompt', 'Refer',
        } <= tags
