"""Process-wide defaults for tag separator and multiword container"""

import logging
import threading
from typing import Optional

from .errors import MissingSeparatorError

logger = logging.getLogger(__name__)

# Pass as a separator to fall back to the global separator
GLOBAL_SEPARATOR = None

DEFAULT_SEPARATOR = '#'
DEFAULT_CONTAINER = '[]'

_lock = threading.Lock()
_state = {"separator": GLOBAL_SEPARATOR, "container": DEFAULT_CONTAINER}


def set_tag_separator(separator: Optional[str]):
    """Set the global tag separator. None clears it."""
    with _lock:
        _state["separator"] = separator
    logger.debug("Global tag separator set to %r", separator)


def get_tag_separator() -> str:
    """
    Return the global tag separator

    Raises:
        MissingSeparatorError: if no separator has been set
    """
    with _lock:
        separator = _state["separator"]
    if separator is None:
        raise MissingSeparatorError()
    return separator


def set_words_container(container: Optional[str]):
    """Set the global multiword container, e.g. '[]' or '{}'. None restores the default."""
    with _lock:
        _state["container"] = container
    logger.debug("Global words container set to %r", container)


def get_words_container() -> str:
    """Return the global multiword container, falling back to DEFAULT_CONTAINER"""
    with _lock:
        container = _state["container"]
    if container is None:
        return DEFAULT_CONTAINER
    return container


set_multiwords_container = set_words_container
get_multiwords_container = get_words_container


def reset_defaults():
    """Clear the global separator and restore the default container"""
    with _lock:
        _state["separator"] = GLOBAL_SEPARATOR
        _state["container"] = DEFAULT_CONTAINER
    logger.debug("Tag extraction defaults reset")


def resolve_separator(separator: Optional[str] = None) -> str:
    """An explicit separator wins over the global one"""
    if separator is not None:
        return separator
    return get_tag_separator()


def resolve_container(container: Optional[str] = None) -> str:
    """An explicit container wins over the global one, then the default"""
    if container is not None:
        return container
    return get_words_container()


__all__ = [
    'GLOBAL_SEPARATOR',
    'DEFAULT_SEPARATOR',
    'DEFAULT_CONTAINER',
    'set_tag_separator',
    'get_tag_separator',
    'set_words_container',
    'get_words_container',
    'set_multiwords_container',
    'get_multiwords_container',
    'reset_defaults',
    'resolve_separator',
    'resolve_container',
]
