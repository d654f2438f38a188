import json
import logging
from typing import Any, Dict, Generator, Optional
from unittest.mock import MagicMock

import pytest

from tracpls.core.chain import CHAIN_CONFIGS

ADDRESS = "0x0000000000000000000000000000000000001004"

ABI = [
    {
        "inputs": [],
        "name": "totalSupply",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "anonymous": False,
        "inputs": [{"indexed": True, "name": "from", "type": "address"}],
        "name": "Deposit",
        "type": "event",
    },
]

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """No api keys, overrides or .env lookups leak into tests"""
    for config in CHAIN_CONFIGS.values():
        monkeypatch.delenv(config.api_key_env, raising=False)
    for name in ("BSC", "ETHEREUM", "POLYGON"):
        monkeypatch.delenv(f"TRACPLS_{name}_API_URL", raising=False)
    monkeypatch.delenv("TRACPLS_LOG_DIR", raising=False)
    monkeypatch.setattr("tracpls.main.load_dotenv", lambda *args, **kwargs: False)
    yield
    logger = logging.getLogger("tracpls")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True

def make_record(source_code: str = "pragma solidity ^0.8.0;\ncontract Token {}\n",
                abi: Optional[str] = None,
                contract_name: str = "Token") -> Dict[str, Any]:
    return {
        "SourceCode": source_code,
        "ABI": json.dumps(ABI, separators=(",", ":")) if abi is None else abi,
        "ContractName": contract_name,
        "CompilerVersion": "v0.8.19+commit.7dd6d404",
        "OptimizationUsed": "1",
        "Runs": "200",
        "Proxy": "0",
        "Implementation": "",
    }

def make_envelope(record: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"status": "1", "message": "OK", "result": [record or make_record()]}

def make_http_response(payload: Any = None, status_code: int = 200,
                       text: Optional[str] = None) -> MagicMock:
    """Stand-in for requests.Response"""
    response = MagicMock()
    response.status_code = status_code
    response.text = json.dumps(payload) if text is None else text
    if text is None:
        response.json.return_value = payload
    else:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    return response

def multi_file_source(sources: Dict[str, str], double_braces: bool = True) -> str:
    bundle = {
        "language": "Solidity",
        "sources": {path: {"content": content} for path, content in sources.items()},
        "settings": {"optimizer": {"enabled": True, "runs": 200}},
    }
    text = json.dumps(bundle)
    return "{" + text + "}" if double_braces else text
