from abc import ABC, abstractmethod


class BaseTextDecoder(ABC):
    """Contract for format-specific text decoders."""

    @abstractmethod
    def decode(self, data: bytes) -> str:
        """Decode raw document bytes into unnormalized text.

        Args:
            data: Raw file content.

        Returns:
            Raw text, possibly empty. Normalization happens in the extractor.

        Raises:
            ExtractionFailureError: if the bytes cannot be decoded.
        """
