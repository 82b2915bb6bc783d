"""Database models for the villager store"""
from .villager import Villager

__all__ = ["Villager"]
