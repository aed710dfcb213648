"""Weakpoint selection, damage transforms and effect rolls for combat hits."""

__version__ = "0.1.0"
