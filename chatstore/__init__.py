"""RAG chat storage service: sessions, messages and retrieval context over REST."""

__version__ = "0.1.0"
