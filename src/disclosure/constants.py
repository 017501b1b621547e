# Disclosure timing. Only showing is delayed; hiding is always immediate.
DEFAULT_DELAY_MS = 100

# Gap between the trigger edge and the overlay anchor point.
DEFAULT_OFFSET = 12.0

# Arrow indicator drawn on the overlay edge facing the trigger.
ARROW_SIZE = 4.0

# Size variants: font size, padding (horizontal, vertical), line height and wrap width.
# Approximate glyph width is used for wrapping since layout runs headless.
TOOLTIP_SIZES = {
    "sm": {"font_size": 10, "padding_x": 4.0, "padding_y": 2.0, "line_height": 14.0, "max_width": 150.0},
    "md": {"font_size": 12, "padding_x": 8.0, "padding_y": 4.0, "line_height": 16.0, "max_width": 200.0},
    "lg": {"font_size": 14, "padding_x": 16.0, "padding_y": 8.0, "line_height": 20.0, "max_width": 300.0},
}
GLYPH_WIDTH_RATIO = 0.6

# Overlay colours (RGB).
OVERLAY_BG_COLOR = (36, 38, 52)
OVERLAY_BORDER_COLOR = (150, 150, 180)
OVERLAY_TEXT_COLOR = (240, 240, 245)

# Showcase window.
SHOWCASE_WIDTH = 800
SHOWCASE_HEIGHT = 600
SHOWCASE_TRIGGER_WIDTH = 140
SHOWCASE_TRIGGER_HEIGHT = 44
