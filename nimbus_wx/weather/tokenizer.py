from typing import List, Optional


class ReportTokenizer:
    """Split raw report text into whitespace-separated groups."""

    @staticmethod
    def tokenize(raw_text: Optional[str]) -> List[str]:
        """
        Return the report groups in order, duplicates included.

        Runs of whitespace (spaces, tabs, newlines) count as one separator.
        """
        if not raw_text:
            return []
        return raw_text.split()
