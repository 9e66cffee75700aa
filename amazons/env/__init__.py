"""Gymnasium environment wrapping the Amazons board."""

from .gym_env import AmazonsEnv

__all__ = ["AmazonsEnv"]
