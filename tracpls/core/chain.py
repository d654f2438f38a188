"""
supported chains and their explorer api configuration
bsc, ethereum, polygon - one api key environment variable per explorer
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional

from tracpls.config import Config
from tracpls.core.errors import ConfigurationError

class Chain(Enum):
    BSC = "bsc"
    ETHEREUM = "ethereum"
    POLYGON = "polygon"

@dataclass(frozen=True)
class ChainConfig:
    """explorer endpoint and api key variable for one chain"""
    api_url: str
    api_key_env: str
    explorer_url: str

CHAIN_CONFIGS: Dict[Chain, ChainConfig] = {
    Chain.BSC: ChainConfig(
        api_url="https://api.bscscan.com/api",
        api_key_env="TRACPLS_BSCSCAN_APIKEY",
        explorer_url="https://bscscan.com/address/",
    ),
    Chain.ETHEREUM: ChainConfig(
        api_url="https://api.etherscan.io/api",
        api_key_env="TRACPLS_ETHERSCAN_APIKEY",
        explorer_url="https://etherscan.io/address/",
    ),
    Chain.POLYGON: ChainConfig(
        api_url="https://api.polygonscan.com/api",
        api_key_env="TRACPLS_POLYGONSCAN_APIKEY",
        explorer_url="https://polygonscan.com/address/",
    ),
}

def get_api_url(chain: Chain) -> str:
    """explorer api base url, honouring TRACPLS_<CHAIN>_API_URL"""
    return Config.api_url_override(chain.name) or CHAIN_CONFIGS[chain].api_url

def resolve_api_key(chain: Chain, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    read the api key for a chain from its environment variable

    args:
        chain: selected chain
        environ: mapping to read from (defaults to os.environ)

    returns:
        non-empty api key

    raises:
        ConfigurationError: variable missing or empty
    """
    env = os.environ if environ is None else environ
    var_name = CHAIN_CONFIGS[chain].api_key_env
    api_key = env.get(var_name, '').strip()
    if not api_key:
        raise ConfigurationError(
            f"required environment variable '{var_name}' is not defined",
            chain=chain.value,
        )
    return api_key

def get_explorer_url(chain: Chain, address: str) -> str:
    return f"{CHAIN_CONFIGS[chain].explorer_url}{address}"
