"""Engine building blocks: float formatting, hash table, documents, vectors and UI records."""

__version__ = "0.1.0"