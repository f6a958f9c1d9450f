from .logging import LogMessage

__all__ = ["LogMessage"]
