import math

from secdoc.documents.models import ContentProfile

SECURITY_KEYWORDS = (
    "security",
    "cybersecurity",
    "vulnerability",
    "threat",
    "risk",
    "compliance",
    "encryption",
    "authentication",
    "authorization",
    "firewall",
    "malware",
    "phishing",
    "breach",
    "incident",
    "policy",
    "procedure",
    "audit",
    "access control",
    "data protection",
    "privacy",
    "gdpr",
    "hipaa",
    "iso 27001",
    "nist",
    "sox",
    "pci dss",
)

WORDS_PER_MINUTE = 200


def profile_content(text: str) -> ContentProfile:
    """Count words and lines and list the security keywords present.

    Keywords match as case-insensitive substrings.
    """
    lowered = text.lower()
    found = tuple(keyword for keyword in SECURITY_KEYWORDS if keyword in lowered)
    word_count = len(text.split())
    return ContentProfile(
        length=len(text),
        word_count=word_count,
        line_count=len(text.split("\n")),
        has_security_keywords=bool(found),
        security_keywords=found,
        estimated_reading_minutes=math.ceil(word_count / WORDS_PER_MINUTE),
    )
