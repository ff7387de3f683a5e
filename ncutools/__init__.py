"""HTML tree building, date arithmetic, countdown timers and text helpers."""

__version__ = "0.1.0"
__all__ = ["dates", "html", "textio", "timing"]