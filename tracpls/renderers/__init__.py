from typing import Dict, Type

from tracpls.core.response import SourceCodeResponse
from tracpls.renderers.base import BaseRenderer, RenderOptions
from tracpls.renderers.abi import AbiRenderer
from tracpls.renderers.source import SourceRenderer

# Registry of available renderers
RENDERERS: Dict[str, Type[BaseRenderer]] = {
    'abi': AbiRenderer,
    'source': SourceRenderer,
}

def get_renderer(options: RenderOptions) -> BaseRenderer:
    """Get renderer instance for the selected output"""
    return RENDERERS['abi' if options.abi_only else 'source']()

def render(response: SourceCodeResponse, options: RenderOptions) -> None:
    get_renderer(options).render(response, options)
