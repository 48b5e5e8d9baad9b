"""Status code to identifier-safe phrase lookup.

The phrases are taken from :class:`http.HTTPStatus`, so ``'404'`` maps to
``'NotFound'`` and ``'200'`` to ``'OK'``.
"""

import http
import logging
from collections.abc import Callable

from fetchgen.codegen.utils import to_identifier

__all__ = ['DEFAULT_PHRASE', 'StatusPhraseLookup', 'status_phrase']

logger = logging.getLogger(__name__)

StatusPhraseLookup = Callable[[str], str]

DEFAULT_PHRASE = 'Default'

STATUSES: dict[str, str] = {
    str(status.value): to_identifier(status.phrase) for status in http.HTTPStatus
}


def status_phrase(code: str) -> str:
    """Return the phrase for a numeric status code string.

    Unknown codes fall back to ``Status<code>``.
    """
    try:
        return STATUSES[code]
    except KeyError:
        logger.warning(f'Unknown status code {code!r}, using fallback phrase')
        return f'Status{to_identifier(code)}'
