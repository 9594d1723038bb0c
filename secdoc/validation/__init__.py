from secdoc.validation.validator import MIN_CONTENT_LENGTH, validate_content

__all__ = ["MIN_CONTENT_LENGTH", "validate_content"]
