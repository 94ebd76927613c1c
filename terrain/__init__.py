"""Procedural terrain building blocks: noise kernels, OBJ models, a camera and matrix helpers."""

__version__ = "0.1.0"