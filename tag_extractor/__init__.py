"""Extract #tags and #[multi word tags] from text and turn them into HTML links

Example:
    >>> import tag_extractor
    >>> tag_extractor.set_tag_separator('#')
    >>> tag_extractor.extract_tags('#social, economy, #physics, #[web development]')
    ['social', 'physics', 'web development']
"""

import logging

from .config import (
    DEFAULT_CONTAINER,
    DEFAULT_SEPARATOR,
    GLOBAL_SEPARATOR,
    get_multiwords_container,
    get_tag_separator,
    get_words_container,
    reset_defaults,
    set_multiwords_container,
    set_tag_separator,
    set_words_container,
)
from .errors import (
    InvalidContainerError,
    MissingSeparatorError,
    TagExtractorError,
    TagSeparatorError,
)
from .extractors import HTMLExtractor, StringExtractor, build_tag_pattern
from .native import TaggedText, convert_tags_to_html_links, extract_tags, linkify_tags

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'DEFAULT_CONTAINER',
    'DEFAULT_SEPARATOR',
    'GLOBAL_SEPARATOR',
    'get_multiwords_container',
    'get_tag_separator',
    'get_words_container',
    'reset_defaults',
    'set_multiwords_container',
    'set_tag_separator',
    'set_words_container',
    'InvalidContainerError',
    'MissingSeparatorError',
    'TagExtractorError',
    'TagSeparatorError',
    'HTMLExtractor',
    'StringExtractor',
    'build_tag_pattern',
    'TaggedText',
    'convert_tags_to_html_links',
    'extract_tags',
    'linkify_tags',
]
