from secdoc.extraction.base import BaseTextDecoder


class PlainTextAdapter(BaseTextDecoder):
    """Decodes plain text and markdown as UTF-8."""

    def decode(self, data: bytes) -> str:
        return data.decode("utf-8-sig", errors="replace")
