"""Tag helpers working directly on strings"""

from typing import List, Mapping, Optional

from .extractors import HTMLExtractor, StringExtractor
from .extractors.html_extractor import LinkFunction


def extract_tags(text: str, separator: Optional[str] = None,
                 container: Optional[str] = None,
                 options: Optional[Mapping] = None,
                 with_separator: bool = False) -> List[str]:
    """
    Extract tags from text

    Args:
        text: The text to extract tags from
        separator: Separator to use, defaults to the global separator
        container: Multiword container, defaults to the global container
        options: Extraction options, see StringExtractor.extract
        with_separator: Keep separators and containers on the tags

    Returns:
        ['#tag1', '#[long tag]'] or ['tag1', 'long tag']
    """
    extractor = StringExtractor(text)
    if with_separator:
        return extractor.extract_with_separator(separator, container, options)
    return extractor.extract(separator, container, options)


def convert_tags_to_html_links(text: str, separator: Optional[str] = None,
                               container: Optional[str] = None,
                               options: Optional[Mapping] = None,
                               link: Optional[LinkFunction] = None) -> str:
    """Wrap the tags of text in <a> links. See HTMLExtractor.convert_tags_to_html_links"""
    return HTMLExtractor(text).convert_tags_to_html_links(separator, container, options, link)


linkify_tags = convert_tags_to_html_links


class TaggedText(str):
    """A str with tag extraction methods"""

    def extract_tags(self, separator=None, container=None, options=None,
                     with_separator=False) -> List[str]:
        return extract_tags(str(self), separator, container, options, with_separator)

    def convert_tags_to_html_links(self, separator=None, container=None,
                                   options=None, link=None) -> 'TaggedText':
        return TaggedText(convert_tags_to_html_links(str(self), separator, container, options, link))

    linkify_tags = convert_tags_to_html_links
