"""Tag to HTML link conversion"""

import html
import logging
import re
from typing import Callable, List, Mapping, Optional

from .pattern import bare_tag, build_tag_pattern, multiword_option
from .string_extractor import StringExtractor

logger = logging.getLogger(__name__)

LinkFunction = Callable[[str], Optional[str]]


class HTMLExtractor:
    """Handle tags in HTML strings

    Wraps a StringExtractor; converting links replaces the wrapped
    source with the converted HTML.
    """

    def __init__(self, source: str):
        self._extractor = StringExtractor(source)

    @property
    def source(self) -> str:
        return self._extractor.source

    def finditer(self, separator=None, container=None, options=None):
        return self._extractor.finditer(separator, container, options)

    def extract_with_separator(self, separator: Optional[str] = None,
                               container: Optional[str] = None,
                               options: Optional[Mapping] = None) -> List[str]:
        return self._extractor.extract_with_separator(separator, container, options)

    def extract(self, separator: Optional[str] = None,
                container: Optional[str] = None,
                options: Optional[Mapping] = None) -> List[str]:
        return self._extractor.extract(separator, container, options)

    def convert_tags_to_html_links(self, separator: Optional[str] = None,
                                   container: Optional[str] = None,
                                   options: Optional[Mapping] = None,
                                   link: Optional[LinkFunction] = None) -> str:
        """
        Wrap every tag of the source in an <a> link

        Args:
            separator: Separator to use, defaults to the global separator
            container: Multiword container, defaults to the global container
            options: Mapping of link options
                class     - css class for the <a> tag
                multiword - convert container-delimited tags (default: True)
            link: Called with the bare tag, returns the href value

        Returns:
            The converted HTML string, which also becomes the new source

        Example:
            >>> HTMLExtractor('a #tag').convert_tags_to_html_links(
            ...     '#', options={'class': 'tag'}, link=lambda t: f'/tags/{t}')
            'a <a class="tag" href="/tags/tag">#tag</a>'
        """
        css_class = options.get("class") if options else None
        class_attr = f'class="{html.escape(css_class)}" ' if css_class is not None else ''

        def to_link(match: re.Match) -> str:
            href = (link(bare_tag(match)) if link else None) or ''
            return f'<a {class_attr}href="{html.escape(href)}">{match.group()}</a>'

        # Single pass, so inserted markup is never matched again
        pattern = build_tag_pattern(separator, container, multiword_option(options))
        result, count = pattern.subn(to_link, self.source)

        logger.debug("Converted %d tag(s) to links", count)
        self._extractor = StringExtractor(result)
        return result

    linkify_tags = convert_tags_to_html_links
