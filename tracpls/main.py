#!/usr/bin/env python3
"""tracpls - view verified smart contract code and ABI on the terminal"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from tracpls import __version__
from tracpls.client.explorer import fetch
from tracpls.config import Config
from tracpls.core.chain import Chain, get_explorer_url, resolve_api_key
from tracpls.core.errors import TracplsError
from tracpls.renderers import RenderOptions, render
from tracpls.utils.logger import setup_logger

RAW_BODY_PREVIEW = 500

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tracpls',
        description='Get smart contract code and its ABI for ease of viewing on terminal'
    )

    parser.add_argument('--address', '-a', required=True,
                        help='Target contract address to get its code or ABI from')
    parser.add_argument('--chain', '-c', required=True,
                        choices=[c.value for c in Chain],
                        help='Chain whose block explorer to query')
    parser.add_argument('--abi-only', action='store_true',
                        help='Get only contract ABI')
    parser.add_argument('--no-abi-pretty-print', action='store_true',
                        help='Print the ABI as served, only valid with --abi-only')
    parser.add_argument('--no-clean-crlf', action='store_true',
                        help='Keep CR/LF character codes as served')
    parser.add_argument('--out-dir', type=Path,
                        help='Write abi.json or the source tree into this directory')
    parser.add_argument('--silence', '-s', action='store_true',
                        help='Suppress informational messages')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show debug messages')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    return parser

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)

    # make sure flags are used only when it's proper
    if args.no_abi_pretty_print and not args.abi_only:
        parser.error('--no-abi-pretty-print can only be used when --abi-only exists')
    if args.silence and args.verbose:
        parser.error('--silence and --verbose cannot be used together')

    return args

def get_options(args: argparse.Namespace) -> RenderOptions:
    """Map CLI args to renderer options"""
    return RenderOptions(
        abi_only=args.abi_only,
        pretty_print=not args.no_abi_pretty_print,
        clean_crlf=not args.no_clean_crlf,
        out_dir=args.out_dir,
        silent=args.silence,
    )

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    # Load environment variables from .env file
    load_dotenv()

    if args.silence:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    try:
        logger = setup_logger('tracpls', level=level, log_dir=Config.log_dir())
        chain = Chain(args.chain)
        api_key = resolve_api_key(chain)

        logger.debug(f"fetching {get_explorer_url(chain, args.address)}")
        response = fetch(chain, args.address, api_key)
        logger.debug(f"contract metadata: {response.to_dict()}")

        render(response, get_options(args))
    except TracplsError as e:
        logger = logging.getLogger('tracpls')
        logger.error(str(e))
        if e.raw_body:
            logger.debug(f"raw body: {e.raw_body[:RAW_BODY_PREVIEW]}")
        return e.exit_code

    return 0

if __name__ == '__main__':
    exit(main())
