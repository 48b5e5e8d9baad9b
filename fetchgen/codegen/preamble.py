__all__ = ['REQUEST_OPTIONS', 'format_preamble']

REQUEST_OPTIONS = 'RequestOptions'


def format_preamble(indent: int = 2) -> str:
    """Declarations shared by every generated function, emitted once per run."""
    return f'interface {REQUEST_OPTIONS} {{\n{" " * indent}signal?: AbortSignal;\n}}'
