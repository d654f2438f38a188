from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import json

from tracpls.core.errors import ParseError
from tracpls.utils.sources import decode_standard_json, is_standard_json

@dataclass(frozen=True)
class FileEntry:
    """One file of a multi-file verified source"""
    path: str
    content: str

@dataclass
class SourceCodeResponse:
    """A single record of the explorer getsourcecode result"""

    contract_name: str
    abi: str  # JSON-encoded string, as served
    source_code: str

    compiler_version: Optional[str] = None
    optimization_used: Optional[bool] = None
    proxy: bool = False
    implementation: Optional[str] = None

    # Context for diagnostics
    chain: Optional[str] = None
    address: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any], chain: Optional[str] = None,
                    address: Optional[str] = None) -> 'SourceCodeResponse':
        """Build from one entry of the envelope's result list"""
        if not isinstance(record, dict):
            raise ParseError("unexpected result record in explorer response",
                             chain=chain, address=address, raw_body=json.dumps(record))

        optimization = record.get('OptimizationUsed')

        return cls(
            contract_name=record.get('ContractName') or '',
            abi=record.get('ABI') or '',
            source_code=record.get('SourceCode') or '',
            compiler_version=record.get('CompilerVersion') or None,
            optimization_used=None if optimization in (None, '') else optimization == '1',
            proxy=record.get('Proxy') == '1',
            implementation=record.get('Implementation') or None,
            chain=chain,
            address=address,
        )

    @property
    def is_verified(self) -> bool:
        return bool(self.source_code.strip())

    @property
    def is_multi_file(self) -> bool:
        return is_standard_json(self.source_code)

    def decode_abi(self) -> Any:
        """Unescape the ABI string into JSON, failing on anything else"""
        try:
            return json.loads(self.abi)
        except ValueError as e:
            # Unverified contracts carry a plain message instead of JSON
            raise ParseError(
                f"could not decode contract abi: {self.abi.strip() or 'empty'} ({e})",
                chain=self.chain, address=self.address, raw_body=self.abi,
            )

    def decode_sources(self) -> List[FileEntry]:
        """
        Decode a multi-file SourceCode value into file entries.

        Standard JSON Input keeps files under 'sources'; the older
        multi-part format is the path -> {content} mapping itself.
        """
        try:
            data = decode_standard_json(self.source_code)
        except ValueError as e:
            raise ParseError(f"could not decode multi-file source code: {e}",
                             chain=self.chain, address=self.address,
                             raw_body=self.source_code)

        sources = data.get('sources', data)
        if not isinstance(sources, dict) or not sources:
            raise ParseError("multi-file source code has no 'sources' mapping",
                             chain=self.chain, address=self.address,
                             raw_body=self.source_code)

        entries = []
        for path, obj in sources.items():
            content = obj.get('content') if isinstance(obj, dict) else None
            if not isinstance(content, str):
                raise ParseError(f"source entry '{path}' has no content",
                                 chain=self.chain, address=self.address)
            entries.append(FileEntry(path=path, content=content))
        return entries

    def to_dict(self) -> dict:
        """Metadata summary (excludes source and abi)"""
        return {
            'contract_name': self.contract_name,
            'compiler_version': self.compiler_version,
            'optimization_used': self.optimization_used,
            'proxy': self.proxy,
            'implementation': self.implementation,
            'multi_file': self.is_multi_file,
        }
