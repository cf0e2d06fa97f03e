"""Tag extraction from plain strings"""

import logging
import re
from typing import Iterator, List, Mapping, Optional

from .pattern import bare_tag, build_tag_pattern, multiword_option

logger = logging.getLogger(__name__)


class StringExtractor:
    """Extract tags from a string

    Tags start with a separator ('#tag'). Tags made of several words are
    wrapped in a container after the separator ('#[web development]').
    """

    def __init__(self, source: str):
        self._source = source

    @property
    def source(self) -> str:
        return self._source

    def finditer(self, separator: Optional[str] = None,
                 container: Optional[str] = None,
                 options: Optional[Mapping] = None) -> Iterator[re.Match]:
        """Iterate over tag matches in the source, left to right"""
        pattern = build_tag_pattern(separator, container, multiword_option(options))
        return pattern.finditer(self._source)

    def extract_with_separator(self, separator: Optional[str] = None,
                               container: Optional[str] = None,
                               options: Optional[Mapping] = None) -> List[str]:
        """
        Extract tags along with their separators

        Args:
            separator: Separator to use, defaults to the global separator
            container: Multiword container, defaults to the global container
            options: Mapping of extraction options
                multiword - extract container-delimited tags (default: True)

        Returns:
            Tags in order of appearance, e.g. ['#tag1', '#[long tag]', '#tag2']
        """
        tags = [m.group() for m in self.finditer(separator, container, options)]
        logger.debug("Extracted %d tag(s)", len(tags))
        return tags

    def extract(self, separator: Optional[str] = None,
                container: Optional[str] = None,
                options: Optional[Mapping] = None) -> List[str]:
        """
        Extract tags without separators or containers

        Takes the same arguments as extract_with_separator.

        Returns:
            Tags in order of appearance, e.g. ['tag1', 'long tag', 'tag2']
        """
        tags = [bare_tag(m) for m in self.finditer(separator, container, options)]
        logger.debug("Extracted %d tag(s)", len(tags))
        return tags
