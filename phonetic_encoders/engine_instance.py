"""Global phonetic engine instance to avoid circular imports."""

from .core.engine import PhoneticEngine

# Global phonetic engine instance
phonetic_engine = PhoneticEngine()
