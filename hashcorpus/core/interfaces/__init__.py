"""
Interface definitions for hashcorpus services.
"""

from .logger import ILogger

__all__ = ["ILogger"]
