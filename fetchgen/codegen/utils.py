import re
import textwrap

__all__ = (
    'camelize',
    'capitalize',
    'depluralize',
    'indent_block',
    'is_placeholder',
    'to_identifier',
)

_SEPARATOR_RUN = re.compile(r'(?<=[^\-_\s])[\-_\s]+([^\-_\s])')
_NON_IDENTIFIER = re.compile(r'[^A-Za-z0-9]+')


def capitalize(input_string):
    if not input_string:
        return ''
    return input_string[0].upper() + input_string[1:]


def depluralize(segment: str) -> str:
    """Strip a single trailing ``s``."""
    return segment[:-1] if segment.endswith('s') else segment


def is_placeholder(segment: str) -> bool:
    return segment.startswith('{')


def camelize(name: str) -> str:
    """Convert a hyphen, underscore or space separated string to camelCase.

    Leading separators are dropped and the first character is lowered, so
    ``'get--user-posts'`` becomes ``'getUserPosts'``.
    """
    name = name.lstrip('-_ ')
    if not name:
        return ''
    name = _SEPARATOR_RUN.sub(lambda m: m.group(1).upper(), name)
    name = name.rstrip('-_ ')
    return name[0].lower() + name[1:]


def to_identifier(text: str) -> str:
    """Collapse a phrase like ``'Not Found'`` into ``'NotFound'``."""
    parts = _NON_IDENTIFIER.split(text)
    return ''.join(capitalize(part) for part in parts if part)


def indent_block(text: str, width: int) -> str:
    """Indent every line but the first by ``width`` spaces.

    Used when a multi-line type body is embedded after a field name.
    """
    first, _, rest = text.partition('\n')
    if not rest:
        return first
    return f'{first}\n{textwrap.indent(rest, " " * width)}'
