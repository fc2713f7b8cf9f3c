"""Extract timestamped YouTube transcripts by driving a headless browser."""

__version__ = "0.1.0"
