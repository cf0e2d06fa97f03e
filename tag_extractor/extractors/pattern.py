"""Regex construction for tag matching"""

import logging
import re
from typing import Mapping, Optional, Tuple

from ..config import resolve_container, resolve_separator
from ..errors import InvalidContainerError

logger = logging.getLogger(__name__)

# A tag body starts with a letter, never a digit or another separator
MONO_WORD_PATTERN = r'[a-zA-Z][\w-]*'
MULTI_WORDS_PATTERN = r'[a-zA-Z][\w\s-]*'


def split_container(container: str) -> Tuple[str, str]:
    """
    Split a container string into its open and close characters

    Args:
        container: A two character string such as '[]'

    Returns:
        (open, close) tuple

    Raises:
        InvalidContainerError: if container is not exactly two characters
    """
    if not isinstance(container, str) or len(container) != 2:
        raise InvalidContainerError(container)
    return container[0], container[1]


def build_tag_pattern(separator: Optional[str] = None,
                      container: Optional[str] = None,
                      multiword: bool = True) -> re.Pattern:
    """
    Build the regex matching tags for a separator and container

    Simple tags are captured in the 'word' group, the body of multiword
    tags (without the container) in the 'phrase' group.

    Args:
        separator: Tag separator, defaults to the global separator
        container: Multiword container, defaults to the global container
        multiword: Whether to match container-delimited multiword tags

    Returns:
        Compiled pattern

    Raises:
        MissingSeparatorError: if no separator is given and none is set globally
        InvalidContainerError: if multiword is set and the container is not two characters
    """
    tag_separator = re.escape(resolve_separator(separator))
    if multiword:
        left, right = (re.escape(c) for c in split_container(resolve_container(container)))
        pattern = (
            f'{tag_separator}(?:(?P<word>{MONO_WORD_PATTERN})'
            f'|{left}(?P<phrase>{MULTI_WORDS_PATTERN}){right})'
        )
    else:
        pattern = f'{tag_separator}(?P<word>{MONO_WORD_PATTERN})'

    logger.debug("Built tag pattern %r", pattern)
    return re.compile(pattern, re.ASCII)


def bare_tag(match: re.Match) -> str:
    """Return a matched tag without its separator and container"""
    word = match.group('word')
    if word is not None:
        return word
    return match.group('phrase')


def multiword_option(options: Optional[Mapping]) -> bool:
    """Read the 'multiword' flag from an options mapping, on by default"""
    if options is None:
        return True
    return bool(options.get("multiword", True))
