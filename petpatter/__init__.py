"""Create dogs and cats, then pat them and read what they say."""

__version__ = "1.0.0"
__all__ = ["app", "pets"]