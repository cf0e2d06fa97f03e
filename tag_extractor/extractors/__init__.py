"""Extractors for tags in plain and HTML strings"""

from .pattern import build_tag_pattern, split_container
from .string_extractor import StringExtractor
from .html_extractor import HTMLExtractor

__all__ = ['StringExtractor', 'HTMLExtractor', 'build_tag_pattern', 'split_container']
