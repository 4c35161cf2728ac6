"""Raw XML text buffer with whole-file load and save."""

from .buffer import XMLBuffer

__all__ = ["XMLBuffer"]
