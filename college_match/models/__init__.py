# Export all match models for easy imports
from .base import Base
from .cutoff import CutoffRecord

__all__ = [
    "Base",
    "CutoffRecord",
]
