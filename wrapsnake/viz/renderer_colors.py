# wrapsnake/viz/renderer_colors.py
BG    = (250, 250, 250)
GRID  = (230, 230, 230)
FOOD  = (231, 76, 60)
HEAD  = (46, 204, 113)
BODY  = (39, 174, 96)
TEXT  = (40, 40, 48)
SHADE = (0, 0, 0, 140)
OVER_TEXT = (240, 240, 250)
