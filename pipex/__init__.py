"""Search-path lookup, here-document reading and printf-style formatting."""

__version__ = "1.0.0"
__all__ = ["paths", "heredoc", "printf_flags", "printf"]