"""Theme constants for the Dash app."""

BACKGROUND = "#FBFCFC"
SIDEBAR_BG = "#EAF2F8"
BORDER = "#AEB6BF"
TEXT = "#34495E"
HEADER = "#1B2631"
MUTED = "#85929E"

FONT_STACK = '"Source Sans Pro", "Helvetica Neue", Arial, sans-serif'

SIDEBAR_WIDTH = "320px"

# Chart size used by the original client form
PLOT_WIDTH = 1200
PLOT_HEIGHT = 600
