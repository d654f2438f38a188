from typing import Optional


class TracplsError(Exception):
    """Base error - every failure is terminal and maps to an exit code"""

    exit_code: int = 1

    def __init__(self, message: str, chain: Optional[str] = None,
                 address: Optional[str] = None, raw_body: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.chain = chain
        self.address = address
        self.raw_body = raw_body

    def context(self) -> str:
        """chain/address suffix for diagnostics"""
        parts = []
        if self.chain:
            parts.append(f"chain={self.chain}")
        if self.address:
            parts.append(f"address={self.address}")
        return ', '.join(parts)

    def __str__(self):
        ctx = self.context()
        return f"{self.message} ({ctx})" if ctx else self.message


class ConfigurationError(TracplsError):
    """Missing api key, invalid chain or address"""
    exit_code = 2


class NetworkError(TracplsError):
    """Connection failure, non-200 status or explorer rejection"""
    exit_code = 3


class ParseError(TracplsError):
    """Malformed envelope, abi or multi-file source"""
    exit_code = 4


class IoError(TracplsError):
    exit_code = 5

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
