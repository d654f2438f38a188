from pathlib import Path
from typing import Optional
import os

class Config:
    """Global configuration

    Values that come from the environment are read lazily so that a .env
    file loaded by the CLI is honoured.
    """
    
    # Environment variable names
    ENV_PREFIX: str = 'TRACPLS'
    LOG_DIR_ENV: str = 'TRACPLS_LOG_DIR'
    
    # Explorer api query
    API_MODULE: str = 'contract'
    API_ACTION: str = 'getsourcecode'
    
    # Output
    ABI_FILENAME: str = 'abi.json'
    ABI_INDENT: int = 4
    SOURCE_SUFFIX: str = '.sol'
    DEFAULT_SOURCE_NAME: str = 'Contract'
    
    @classmethod
    def log_dir(cls) -> Optional[Path]:
        """Directory for log files, None disables file logging"""
        value = os.environ.get(cls.LOG_DIR_ENV, '').strip()
        return Path(value) if value else None
    
    @classmethod
    def api_url_override(cls, chain_name: str) -> Optional[str]:
        """Explorer base url override, e.g. TRACPLS_BSC_API_URL"""
        value = os.environ.get(f"{cls.ENV_PREFIX}_{chain_name.upper()}_API_URL", '').strip()
        return value or None
