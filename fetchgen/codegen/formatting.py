"""Leaf formatters shared by the type builders."""

from fetchgen.codegen.utils import indent_block

__all__ = [
    'format_object_type',
    'format_type_declaration',
    'format_type_field',
    'has_top_level_operator',
]

_TOP_LEVEL_OPERATORS = frozenset('|&')


def format_type_field(readonly: bool, name: str, required: bool, type_: str) -> str:
    """Render one field line: ``[readonly ]name[?]: type;``."""
    return f'{"readonly " if readonly else ""}{name}{"" if required else "?"}: {type_};'


def format_object_type(fields: list[str], indent: int = 2) -> str:
    """Wrap field lines in braces, one field per indented line.

    Fields may themselves span several lines (nested object types); their
    continuation lines are indented along with them.
    """
    if not fields:
        return '{}'
    pad = ' ' * indent
    body = '\n'.join(f'{pad}{indent_block(field, indent)}' for field in fields)
    return f'{{\n{body}\n}}'


def has_top_level_operator(impl: str) -> bool:
    """Whether ``|`` or ``&`` occurs outside every pair of braces."""
    depth = 0
    for char in impl:
        if char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
        elif char in _TOP_LEVEL_OPERATORS and depth == 0:
            return True
    return False


def format_type_declaration(name: str, impl: str) -> str:
    """Declare ``impl`` under ``name`` as an interface or a type alias.

    Object bodies become interfaces unless they are a union or intersection
    of object shapes, which an interface cannot express.
    """
    if not impl.startswith('{') or has_top_level_operator(impl):
        return f'type {name} = {impl}'
    return f'interface {name} {impl}'
