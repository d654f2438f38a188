#!/usr/bin/env python3
"""
block explorer api client for fetching verified contract source code
handles bscscan, etherscan and polygonscan (one request per invocation)
"""

import logging
import re
from typing import Any, Dict

import requests

from tracpls.config import Config
from tracpls.core.chain import Chain, get_api_url
from tracpls.core.errors import ConfigurationError, NetworkError, ParseError
from tracpls.core.response import SourceCodeResponse

ADDRESS_RE = re.compile(r'^0x[0-9a-fA-F]{40}$')

logger = logging.getLogger(__name__)

def validate_address(address: str) -> bool:
    """
    validate evm address format

    args:
        address: address string to validate

    returns:
        true if 0x followed by 40 hex digits
    """
    return bool(address) and ADDRESS_RE.match(address) is not None

class ExplorerClient:
    """client for the getsourcecode endpoint of an etherscan-style explorer"""

    def __init__(self, chain: Chain, api_key: str):
        """
        args:
            chain: blockchain whose explorer to query
            api_key: api key for that explorer
        """
        if not api_key:
            raise ConfigurationError("no api key provided", chain=chain.value)
        self.chain = chain
        self.api_key = api_key

    def fetch_source_code(self, address: str) -> SourceCodeResponse:
        """
        fetch verified contract source code and abi

        args:
            address: contract address (0x...)

        returns:
            first record of the explorer result

        raises:
            ConfigurationError: malformed address (before any request)
            NetworkError: connection failure, non-200 status, explorer rejection
            ParseError: body is not a well-formed envelope
        """
        chain_name = self.chain.value

        if not validate_address(address):
            raise ConfigurationError(f"invalid contract address '{address}'",
                                     chain=chain_name, address=address)

        url = get_api_url(self.chain)
        params = {
            'module': Config.API_MODULE,
            'action': Config.API_ACTION,
            'address': address,
            'apikey': self.api_key
        }

        logger.debug(f"GET {url} module={Config.API_MODULE} action={Config.API_ACTION} address={address}")

        try:
            response = requests.get(url, params=params)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"network error: {e}", chain=chain_name, address=address)

        if response.status_code != 200:
            raise NetworkError(f"explorer returned HTTP {response.status_code}",
                               chain=chain_name, address=address, raw_body=response.text)

        try:
            envelope = response.json()
        except ValueError as e:
            raise ParseError(f"malformed JSON in explorer response: {e}",
                             chain=chain_name, address=address, raw_body=response.text)

        return self._parse_envelope(envelope, address, response.text)

    def _parse_envelope(self, envelope: Any, address: str, raw_body: str) -> SourceCodeResponse:
        """check status and pull out the first result record"""
        chain_name = self.chain.value

        if not isinstance(envelope, dict):
            raise ParseError("explorer response is not a JSON object",
                             chain=chain_name, address=address, raw_body=raw_body)

        result = envelope.get('result')

        if envelope.get('status') != '1':
            # result holds the reason on failures, e.g. "Invalid API Key"
            detail = result if isinstance(result, str) and result else envelope.get('message', 'unknown error')
            raise NetworkError(f"api error: {detail}",
                               chain=chain_name, address=address, raw_body=raw_body)

        if not isinstance(result, list) or not result:
            raise ParseError("explorer response has no result records",
                             chain=chain_name, address=address, raw_body=raw_body)

        record: Dict[str, Any] = result[0]
        return SourceCodeResponse.from_record(record, chain=chain_name, address=address)

def fetch(chain: Chain, address: str, api_key: str) -> SourceCodeResponse:
    """one-shot fetch of a contract's verified source"""
    return ExplorerClient(chain, api_key).fetch_source_code(address)
