from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging
import sys

from tracpls.core.errors import IoError, ParseError
from tracpls.core.response import SourceCodeResponse
from tracpls.utils.sources import sanitize_rel

@dataclass(frozen=True)
class RenderOptions:
    """Output switches taken from the command line"""
    abi_only: bool = False
    pretty_print: bool = True
    clean_crlf: bool = True
    out_dir: Optional[Path] = None
    silent: bool = False

class BaseRenderer(ABC):
    """Abstract base for output renderers"""

    def __init__(self):
        self.logger = logging.getLogger(f"tracpls.renderers.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Renderer name"""
        pass

    @abstractmethod
    def render(self, response: SourceCodeResponse, options: RenderOptions) -> None:
        """
        Write the response to stdout or under options.out_dir

        Raises ParseError on decode failures and IoError on write failures.
        Files written before a failure are left in place.
        """
        pass

    def emit(self, text: str) -> None:
        """Write text plus a trailing newline to stdout"""
        sys.stdout.write(text)
        if not text.endswith('\n'):
            sys.stdout.write('\n')
        sys.stdout.flush()

    def resolve_target(self, out_dir: Path, rel: str, response: SourceCodeResponse) -> Path:
        """Map a relative source path under out_dir, refusing escapes"""
        clean = sanitize_rel(rel)
        if not clean:
            raise ParseError(f"empty source path '{rel}'",
                             chain=response.chain, address=response.address)

        root = out_dir.resolve()
        target = (root / clean).resolve()
        try:
            target.relative_to(root)
        except ValueError:
            raise ParseError(f"source path '{rel}' escapes the output directory",
                             chain=response.chain, address=response.address)
        return target

    def write_file(self, path: Path, content: str, options: RenderOptions,
                   response: SourceCodeResponse) -> None:
        """Create parent directories and write content verbatim"""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
        except OSError as e:
            raise IoError(f"could not write {path}: {e}", path=str(path),
                          chain=response.chain, address=response.address)

        if not options.silent:
            self.logger.info(f"wrote {path}")
