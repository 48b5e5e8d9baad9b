"""Request function construction.

Generates one ``fetch``-based async function per operation. The function
takes the params type and an options object, performs exactly one request
and resolves to the result union:

    export async function getUser(
      params: GetUserParams,
      options: RequestOptions = {}
    ): Promise<GetUserResult> {
      const response = await fetch(`https://api.example.com/users/${params.id}`, {
        method: "GET",
        credentials: "same-origin",
        signal: options.signal,
      });

      const { status, headers } = response;

      const data = await response.json();

      return { status, headers, data } as GetUserResult;
    }
"""

import json
import logging
import re
from typing import TYPE_CHECKING

from fetchgen.codegen.preamble import REQUEST_OPTIONS
from fetchgen.codegen.types import ResponseParsing, is_json_media_type

if TYPE_CHECKING:
    from fetchgen.codegen.types import OperationDescriptor, OperationNames, Param

__all__ = ['RequestFunctionBuilder']

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r'\{([^}]*)\}')

QUERY_VAR = (
    'const query = params.query'
    ' ? `?${new URLSearchParams(params.query as any)}` : "";'
)


class RequestFunctionBuilder:
    """Assembles the request function of an operation.

    Args:
        credentials: Value of the fetch ``credentials`` option, or None to
            leave it out.
        export: Whether the function is exported.
        indent: Number of spaces per indentation level.
    """

    def __init__(
        self,
        credentials: str | None = 'same-origin',
        export: bool = True,
        indent: int = 2,
    ):
        self.credentials = credentials
        self.export = export
        self.pad = ' ' * indent

    def format_url(self, descriptor: 'OperationDescriptor') -> str:
        path = _PLACEHOLDER.sub(r'${params.\1}', descriptor.path)
        url = f'{descriptor.server}{path}'
        if descriptor.query_params:
            url += '${query}'
        return f'`{url}`'

    def body_field(self, body: 'Param | None') -> str | None:
        if body is None:
            return None
        if body.media_type and is_json_media_type(body.media_type):
            return 'body: JSON.stringify(params.data),'
        return 'body: params.data,'

    def headers_field(self, descriptor: 'OperationDescriptor') -> str | None:
        body = descriptor.body_param
        entries = []
        if body is not None and body.media_type:
            entries.append(f'"Content-Type": {json.dumps(body.media_type)},')
        if descriptor.header_params:
            entries.append('...params.headers,')
        if not entries:
            return None
        return f'headers: {{ {" ".join(entries)} }},'

    def request_options(self, descriptor: 'OperationDescriptor') -> list[str]:
        options = [f'method: "{descriptor.verb.upper()}",']
        if self.credentials is not None:
            options.append(f'credentials: {json.dumps(self.credentials)},')
        options.append('signal: options.signal,')
        extra = (self.body_field(descriptor.body_param), self.headers_field(descriptor))
        options += [field for field in extra if field is not None]
        return options

    def parse_statements(self, parsing: ResponseParsing) -> list[str]:
        """Statements that bind ``data`` from the response, if any."""
        if parsing is ResponseParsing.ALL_JSON:
            return ['const data = await response.json();']
        elif parsing is ResponseParsing.ALL_TEXT:
            return ['const data = await response.text();']
        elif parsing is ResponseParsing.MIXED:
            return [
                'const contentType = response.headers.get("Content-Type") ?? "";',
                '',
                'let data: any;',
                '',
                'if (contentType.includes("application/json")) {',
                f'{self.pad}data = await response.json();',
                '} else {',
                f'{self.pad}data = await response.text();',
                '}',
            ]
        return []

    def build(self, descriptor: 'OperationDescriptor', names: 'OperationNames') -> str:
        parsing = ResponseParsing.classify(descriptor.media_types)
        logger.debug(f'Using {parsing.value} response parsing for {names.base}')

        body: list[str] = []
        if descriptor.query_params:
            body += [QUERY_VAR, '']

        body.append(f'const response = await fetch({self.format_url(descriptor)}, {{')
        body += [f'{self.pad}{option}' for option in self.request_options(descriptor)]
        body += ['});', '', 'const { status, headers } = response;', '']

        parse = self.parse_statements(parsing)
        if parse:
            body += [*parse, '']
            returned = 'status, headers, data'
        else:
            returned = 'status, headers'
        body.append(f'return {{ {returned} }} as {names.result};')

        export = 'export ' if self.export else ''
        lines = [
            f'{export}async function {names.base}(',
            f'{self.pad}params: {names.params},',
            f'{self.pad}options: {REQUEST_OPTIONS} = {{}}',
            f'): Promise<{names.result}> {{',
            *(f'{self.pad}{line}' if line else '' for line in body),
            '}',
        ]
        return '\n'.join(lines)
