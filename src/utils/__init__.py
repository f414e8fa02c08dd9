"""
Shared utilities for Order Consolidator
"""
from .logger import OrderLogger, get_logger

__all__ = ['OrderLogger', 'get_logger']
