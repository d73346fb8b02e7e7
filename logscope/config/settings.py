"""Parsing and analysis defaults"""

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_TOP_N = 10

# Keywords shorter than this are discarded
MIN_KEYWORD_LENGTH = 3

STOPWORDS = frozenset({
    "the", "and", "for", "with", "from", "that", "this", "have", "has",
    "been", "was", "were", "are", "will", "would", "could", "should",
    "not", "but", "can", "into", "its", "just", "when", "then", "also",
    "than", "more", "some", "over", "such", "after", "before", "while",
})
