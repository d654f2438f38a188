"""Fetch verified smart contract source code and ABI from EVM block explorers"""

__version__ = '0.1.0'
