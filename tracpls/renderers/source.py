from pathlib import Path
from typing import Dict, List

from tracpls.config import Config
from tracpls.core.errors import ParseError
from tracpls.core.response import FileEntry, SourceCodeResponse
from tracpls.renderers.base import BaseRenderer, RenderOptions
from tracpls.utils.sources import clean_crlf

class SourceRenderer(BaseRenderer):
    """Renders verified source, single file or multi-file bundle"""

    @property
    def name(self) -> str:
        return "source"

    def render(self, response: SourceCodeResponse, options: RenderOptions) -> None:
        if not response.is_verified:
            raise ParseError("contract source code not verified on explorer",
                             chain=response.chain, address=response.address)

        if response.is_multi_file:
            self.logger.debug(f"{response.contract_name}: multi-file source")
            self._render_multi(response, response.decode_sources(), options)
        else:
            self._render_single(response, options)

    def _render_single(self, response: SourceCodeResponse, options: RenderOptions) -> None:
        content = response.source_code
        if options.clean_crlf:
            content = clean_crlf(content)

        if options.out_dir is None:
            self.emit(content)
            return

        name = response.contract_name or Config.DEFAULT_SOURCE_NAME
        target = self.resolve_target(options.out_dir, name + Config.SOURCE_SUFFIX, response)
        self.write_file(target, content, options, response)

    def _render_multi(self, response: SourceCodeResponse, entries: List[FileEntry],
                      options: RenderOptions) -> None:
        if options.out_dir is None:
            chunks = []
            for entry in entries:
                content = clean_crlf(entry.content) if options.clean_crlf else entry.content
                content = content.rstrip('\r\n')
                chunks.append(f"// File: {entry.path}\n{content}\n")
            self.emit('\n'.join(chunks))
            return

        # No rollback: a failure leaves earlier files in place
        written: Dict[Path, str] = {}
        for entry in entries:
            target = self.resolve_target(options.out_dir, entry.path, response)
            if target in written:
                raise ParseError(
                    f"source paths '{written[target]}' and '{entry.path}' both map to {target}",
                    chain=response.chain, address=response.address,
                )
            written[target] = entry.path
            content = clean_crlf(entry.content) if options.clean_crlf else entry.content
            self.write_file(target, content, options, response)
