"""Value types for Roblox instances, with JSON conversion and an attribute binary codec."""

__version__ = "0.1.0"