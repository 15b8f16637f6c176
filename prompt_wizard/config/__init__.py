"""
Configuration management - environment driven.
"""
from .environment import EnvironmentConfig

__all__ = ['EnvironmentConfig']
