"""A small pixel-art editor: a drawable layer, pointer scene, zoomable view and Tk window."""

__version__ = "0.1.0"