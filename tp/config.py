"""Program settings."""

# Region view is only useful while the grid still fits on screen
REGION_VIEW_MAX = 7

SQUARE_EXAMPLE_SIZES = (3, 5)
TRIANGLE_EXAMPLE_SIZES = (3, 6)

SQUARE_TITLE = "Concentric Square Pattern - Diagonal Decomposition"
SQUARE_PROMPT = "Enter the size parameter n"

TRIANGLE_TITLE = "Right Triangle Pattern - Single Loop Implementation"
TRIANGLE_PROMPT = "Enter the height of the triangle"
