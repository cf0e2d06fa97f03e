import unittest

import tag_extractor
from tag_extractor import config
from tag_extractor.errors import MissingSeparatorError, TagSeparatorError


class TestTagSeparator(unittest.TestCase):
    def setUp(self):
        config.reset_defaults()

    def tearDown(self):
        config.reset_defaults()

    def test_missing_separator(self):
        with self.assertRaises(MissingSeparatorError):
            config.get_tag_separator()

    def test_legacy_error_name(self):
        self.assertIs(TagSeparatorError, MissingSeparatorError)

    def test_set_get_separator(self):
        config.set_tag_separator('@')
        self.assertEqual(config.get_tag_separator(), '@')

    def test_empty_separator_is_accepted(self):
        config.set_tag_separator('')
        self.assertEqual(config.get_tag_separator(), '')

    def test_global_separator_clears(self):
        config.set_tag_separator('#')
        config.set_tag_separator(config.GLOBAL_SEPARATOR)
        with self.assertRaises(MissingSeparatorError):
            config.get_tag_separator()

    def test_explicit_separator_wins(self):
        config.set_tag_separator('@')
        self.assertEqual(config.resolve_separator('#'), '#')
        self.assertEqual(config.resolve_separator(), '@')

    def test_setter_logs(self):
        with self.assertLogs('tag_extractor', level='DEBUG') as logs:
            config.set_tag_separator('#')
        self.assertIn("'#'", logs.output[0])


class TestWordsContainer(unittest.TestCase):
    def setUp(self):
        config.reset_defaults()

    def tearDown(self):
        config.reset_defaults()

    def test_default_container(self):
        self.assertEqual(config.get_words_container(), '[]')
        self.assertEqual(config.DEFAULT_CONTAINER, '[]')

    def test_set_container(self):
        config.set_words_container('{}')
        self.assertEqual(config.get_words_container(), '{}')
        self.assertEqual(config.get_multiwords_container(), '{}')

    def test_multiwords_alias(self):
        config.set_multiwords_container('()')
        self.assertEqual(config.get_words_container(), '()')

    def test_none_restores_default(self):
        config.set_words_container('{}')
        config.set_words_container(None)
        self.assertEqual(config.get_words_container(), '[]')

    def test_explicit_container_wins(self):
        config.set_words_container('{}')
        self.assertEqual(config.resolve_container('()'), '()')
        self.assertEqual(config.resolve_container(), '{}')

    def test_package_exports(self):
        tag_extractor.set_tag_separator('#')
        self.assertEqual(tag_extractor.get_tag_separator(), '#')


if __name__ == '__main__':
    unittest.main()
