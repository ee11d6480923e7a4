"""Render Minecraft-style views such as the player list into PNG images and serve them over HTTP."""

__version__ = "0.1.0"