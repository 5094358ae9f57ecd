from .core import generate, is_valid_key, mid_string

__version__ = "1.0.0"

__all__ = ["generate", "is_valid_key", "mid_string", "__version__"]
