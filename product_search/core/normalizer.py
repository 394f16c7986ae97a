"""Text normalization utilities for consistent query and field processing."""

from typing import List, Optional


class TextNormalizer:
    """Handles text normalization for queries and field values.

    Normalization is a plain lowercase plus leading/trailing whitespace trim.
    No accent folding or delimiter rewriting is applied, so scores depend only
    on the characters the caller supplied.
    """

    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize text for consistent processing.

        Args:
            text: Input text to normalize (None is treated as empty)

        Returns:
            Normalized text, or an empty string for blank input
        """
        if not text or not text.strip():
            return ""

        return text.lower().strip()

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Split normalized text into whitespace-separated tokens.

        Args:
            text: Input text

        Returns:
            List of non-empty tokens
        """
        normalized = self.normalize(text)
        if not normalized:
            return []

        return normalized.split()

    def is_blank(self, text: Optional[str]) -> bool:
        """Return True when text is None, empty or whitespace only."""
        return not text or not text.strip()
