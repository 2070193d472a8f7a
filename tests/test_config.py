"""Tests for config serialization."""

import pytest

from cs01 import serialize, InvalidConfigError, default_config


class TestSerialize:
    """Tests for section/subsection/setting rendering."""

    def test_basic_section(self):
        """Empty subsection name renders a plain section header."""
        text = serialize({'core': {'': {'bare': False}}})
        assert text == '[core]\n  bare = false\n'

    def test_only_one_header(self):
        lines = serialize({'core': {'': {'bare': False}}}).splitlines()
        headers = [line for line in lines if line.startswith('[')]
        assert headers == ['[core]']
        assert lines.index('[core]') < lines.index('  bare = false')

    def test_named_subsection_is_quoted(self):
        text = serialize({'remote': {'origin': {'url': 'https://example.com'}}})
        assert '[remote "origin"]\n' in text
        assert '  url = https://example.com\n' in text

    def test_scalar_types(self):
        """Booleans, numbers and strings use their plain textual form."""
        text = serialize({'user': {'': {'id': 123, 'ratio': 0.5, 'active': True, 'name': 'Ada Lovelace'}}})
        assert text.splitlines() == [
            '[user]',
            '  id = 123',
            '  ratio = 0.5',
            '  active = true',
            '  name = Ada Lovelace',
        ]

    def test_object_values_are_compact_json(self):
        text = serialize({'x': {'': {'meta': {'a': 1, 'b': [1, 2]}}}})
        assert '  meta = {"a":1,"b":[1,2]}\n' in text

    def test_none_value(self):
        assert '  empty = null\n' in serialize({'x': {'': {'empty': None}}})

    def test_insertion_order_preserved(self):
        config = {
            'core': {'': {'z': 1, 'a': 2}},
            'branch': {'main': {'remote': 'origin'}, 'dev': {'remote': 'upstream'}},
        }
        assert serialize(config) == (
            '[core]\n'
            '  z = 1\n'
            '  a = 2\n'
            '[branch "main"]\n'
            '  remote = origin\n'
            '[branch "dev"]\n'
            '  remote = upstream\n'
        )

    def test_subsection_without_settings(self):
        assert serialize({'core': {'': {}}}) == '[core]\n'

    def test_default_config(self):
        text = serialize(default_config(bare=True))
        assert text == (
            '[core]\n'
            '  bare = true\n'
            '  repositoryformatversion = 0\n'
            '  filemode = true\n'
            '  logallrefupdates = true\n'
        )


class TestSerializeErrors:
    """Tests for malformed config input."""

    def test_empty_mapping(self):
        with pytest.raises(InvalidConfigError):
            serialize({})

    @pytest.mark.parametrize('value', [[], None, 'core', 42])
    def test_non_mapping(self, value):
        with pytest.raises(InvalidConfigError):
            serialize(value)

    def test_section_not_mapping(self):
        with pytest.raises(InvalidConfigError, match="Invalid section 'core'"):
            serialize({'core': 'bare'})

    def test_settings_not_mapping(self):
        with pytest.raises(InvalidConfigError, match=r'\[remote "origin"\]'):
            serialize({'remote': {'origin': ['url']}})

    def test_unrenderable_value(self):
        with pytest.raises(InvalidConfigError):
            serialize({'core': {'': {'thing': object()}}})

    def test_is_cs01_error(self):
        from cs01 import Cs01Error
        with pytest.raises(Cs01Error):
            serialize({})
