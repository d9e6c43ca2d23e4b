"""QuStop - Stop-word removal and language guessing for text fingerprinting.

Lightweight package initialization. Import submodules directly where
needed, e.g.:

    from qustop.clean import clean, guess_language
    from qustop.config import QuStopConfig
"""

__version__ = "1.0.0"
__author__ = "Qubase Team"

__all__ = [
    "__version__",
    "__author__",
]
