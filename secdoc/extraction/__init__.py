from secdoc.extraction.extractor import SUPPORTED_MIME_TYPES, TextExtractor, build_extractor
from secdoc.extraction.models import ExtractedText, RawDocument

__all__ = ["SUPPORTED_MIME_TYPES", "ExtractedText", "RawDocument", "TextExtractor", "build_extractor"]
