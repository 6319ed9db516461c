# viz/renderer_colors.py
BG = (0, 0, 0)
GRID = (255, 255, 255)
BODY = (255, 255, 255)
HEAD = (0, 255, 0)
FOOD = (255, 0, 0)
TEXT = (255, 255, 255)
