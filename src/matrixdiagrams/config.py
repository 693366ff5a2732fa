"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents colours, fonts and identifiers from being hardcoded
   throughout the widgets.
2. Decoupling: The model layer only knows highlight style keys ("row",
   "column", "cell"); the colours for them live here.

Exports:
    HIGHLIGHT_COLORS (dict): Style key -> colour with alpha (#rrggbbaa).
    PLACEHOLDER_TEXT (str): Cell text of the result grid when no product exists.
"""

# Application identity
ORG_ID = "matrixdiagrams"
APP_ID = "matrix-diagrams"
VISIBLE_APP_NAME = "Matrix Diagrams"

# Highlight colours (CSS-style #rrggbbaa)
HIGHLIGHT_ROW = "#cc2222a0"
HIGHLIGHT_COLUMN = "#2222cca0"
HIGHLIGHT_CELL = "#22cc22a0"

HIGHLIGHT_COLORS: dict[str, str] = {
    "row": HIGHLIGHT_ROW,
    "column": HIGHLIGHT_COLUMN,
    "cell": HIGHLIGHT_CELL,
}

# Presentation
BACKGROUND_COLOR = "#444455"
FOREGROUND_COLOR = "white"
ERROR_COLOR = "red"
FONT_FAMILY = "monospace"
FONT_POINT_SIZE = 18
HIGHLIGHT_RADIUS = 10  # px, rounded corners of highlight bands
BRACKET_WIDTH = 4  # px
GRID_PADDING = 24  # px

PLACEHOLDER_TEXT = "…"

# Diagram shown when the external selection is missing or invalid (0-based).
DEFAULT_DIAGRAM_INDEX = 0
