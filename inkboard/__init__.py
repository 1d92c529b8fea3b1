"""InkBoard - family dashboard renderer for tri-color e-paper displays.

A JSON layout document splits the screen into widgets; each widget is
painted from small JSON data feeds and the result is written as a PNG
preview and, optionally, as packed black/red channels for the panel.
"""

__version__ = "0.3.0"
__author__ = "InkBoard Team"
__description__ = "Family dashboard renderer for tri-color e-paper displays"

# Package metadata
__all__ = [
    "__author__",
    "__description__",
    "__version__",
]
