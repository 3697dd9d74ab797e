"""LifeRPG — turn real-world activities into XP, levels and loot."""

__version__ = "0.1.0"
