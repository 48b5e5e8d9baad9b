"""Operation name synthesis.

Every generated identifier for an operation derives from a single base
name built from its verb and path:

    get    /users/{id}        -> getUser
    get    /users/{id}/posts  -> getUserPosts
    post   /users             -> createUser
    delete /users/{id}        -> deleteUsers

Segments are processed as a small pipeline. Each segment is first
singularized or not, then placeholder segments are dropped:

- ``get`` singularizes a segment that indexes into a collection, i.e. one
  immediately followed by a ``{placeholder}`` segment.
- Every other verb singularizes the last segment, whatever it is. Mutating
  operations are named as acting on one resource, so a bulk create on
  ``/users`` is still ``createUser``. When the last segment is a
  placeholder nothing is singularized.
"""

import logging

from fetchgen.codegen.types import OperationNames, Verb
from fetchgen.codegen.utils import camelize, capitalize, depluralize, is_placeholder

__all__ = ['VERB_KEYWORDS', 'derive_base_name', 'derive_names', 'singularize_flags']

logger = logging.getLogger(__name__)

VERB_KEYWORDS: dict[str, str] = {
    'get': 'get',
    'post': 'create',
    'put': 'replace',
    'patch': 'update',
    'delete': 'delete',
}


def singularize_flags(segments: list[str], verb: Verb) -> list[bool]:
    """Decide, per segment, whether it should be singularized."""
    last = len(segments) - 1
    if verb == 'get':
        return [
            i < last and is_placeholder(segments[i + 1])
            for i in range(len(segments))
        ]
    return [i == last for i in range(len(segments))]


def derive_base_name(path: str, verb: Verb) -> str:
    segments = path.split('/')
    flags = singularize_flags(segments, verb)

    kept = [
        depluralize(segment) if singular else segment
        for segment, singular in zip(segments, flags)
        if not is_placeholder(segment)
    ]

    return camelize(f'{VERB_KEYWORDS[verb]}-{"-".join(kept)}')


def derive_names(path: str, verb: Verb) -> OperationNames:
    """Derive the base name and every type name depending on it."""
    base = derive_base_name(path, verb)
    prefix = capitalize(base)
    logger.debug(f'Derived operation name {base!r} for {verb.upper()} {path}')
    return OperationNames(
        base=base,
        params=f'{prefix}Params',
        result=f'{prefix}Result',
        prefix=prefix,
    )
