import json

from tracpls.config import Config
from tracpls.core.response import SourceCodeResponse
from tracpls.renderers.base import BaseRenderer, RenderOptions
from tracpls.utils.sources import clean_crlf

class AbiRenderer(BaseRenderer):

    @property
    def name(self) -> str:
        return "abi"

    def render(self, response: SourceCodeResponse, options: RenderOptions) -> None:
        """
        Render the contract ABI

        The ABI string is always decoded first so that an unverified
        contract (plain message instead of JSON) fails before any output.
        Pretty printing re-serializes with indentation; otherwise the
        explorer's own compact text is kept.
        """
        abi = response.decode_abi()

        if options.pretty_print:
            text = json.dumps(abi, indent=Config.ABI_INDENT)
        else:
            text = response.abi.strip()

        if options.clean_crlf:
            text = clean_crlf(text)

        if options.out_dir is None:
            self.emit(text)
            return

        target = options.out_dir / Config.ABI_FILENAME
        self.write_file(target, text + "\n", options, response)
