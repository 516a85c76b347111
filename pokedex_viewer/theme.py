"""UI theme constants — Tokyo Night–inspired dark theme."""

# Base palette
BG = '#1a1b26'
FG = '#c0caf5'
ACCENT = '#7aa2f7'
CARD = '#24283b'
ENTRY_BG = '#414868'
ENTRY_FG = '#c0caf5'
SUBTLE = '#565f89'
FG_DISABLED = '#a0a8c0'  # Readable on SUBTLE when button is disabled
ERROR_FG = '#f7768e'

# Typography
FONT_FAMILY = 'Segoe UI'
TITLE_FONT = (FONT_FAMILY, 12, 'bold')
NAME_FONT = (FONT_FAMILY, 16, 'bold')
LABEL_FONT = (FONT_FAMILY, 9)
SMALL_FONT = (FONT_FAMILY, 8)

# Spacing (use PAD for section gaps, SMALL_PAD for related elements)
PAD = 8
SMALL_PAD = 4
BTN_PAD = (8, 2)

# Window
WINDOW_SIZE = (440, 560)

# Record image: square, pixels
IMAGE_SIZE = 240

# Backdrop: record image blended into BG at this opacity (0..1)
BACKDROP_OPACITY = 0.18

# Fade-out duration before the display is updated (ms)
FADE_MS = 180

ICON_PREV = '◀'
ICON_NEXT = '▶'
ICON_RANDOM = '🎲'
ICON_SEARCH = '🔍'
