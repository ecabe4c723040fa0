"""
Token estimation heuristic.

Approximates language-model token counts from whitespace-delimited word
counts. Not a tokenizer: 1 token is taken to be roughly 0.75 words of
English prose.

Dependencies: None
System role: Chunk sizing for the chunking pipeline
"""

WORDS_PER_TOKEN = 0.75


def estimate_tokens(text: str | None) -> int:
    """
    Estimate the number of tokens in a text.

    Args:
        text: Text to measure (None and non-string values count as empty)

    Returns:
        int: round(word_count / 0.75), 0 for empty text
    """
    if not text or not isinstance(text, str):
        return 0
    words = len(text.split())
    return round(words / WORDS_PER_TOKEN)
