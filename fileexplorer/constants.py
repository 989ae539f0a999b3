"""Constants for File Explorer."""

# Box drawing characters (Unicode).
BOX_TL = "╔"
BOX_TR = "╗"
BOX_BL = "╚"
BOX_BR = "╝"
BOX_H = "═"
BOX_V = "║"

# ASCII fallback box characters.
ASCII_TL = "+"
ASCII_TR = "+"
ASCII_BL = "+"
ASCII_BR = "+"
ASCII_H = "-"
ASCII_V = "|"

# Row markers.
DIR_ICON = "\U0001f4c1"
DIR_ICON_ASCII = "[D]"
FILE_ICON = "\U0001f4c4"
FILE_ICON_ASCII = "[F]"

# Color pair IDs.
C_BACKGROUND = 1
C_WIN_BORDER = 2
C_WIN_TITLE = 3
C_WIN_BODY = 4
C_PATH = 5
C_ERROR = 6
C_FM_SELECTED = 7
C_FM_DIR = 8
C_STATUS = 9
C_SCROLLBAR = 10

# Layout constants
MIN_TERM_WIDTH = 40
MIN_TERM_HEIGHT = 10
HEADER_LINES = 2             # Path line + error/separator line
SIZE_COLUMN_WIDTH = 10
MODIFIED_COLUMN_WIDTH = 19   # YYYY-MM-DD HH:MM:SS
INPUT_TIMEOUT_MS = 500
DEFAULT_DOUBLE_CLICK_INTERVAL = 0.35  # Seconds for double-click detection

STATUS_HINTS = " Enter:Open  Bksp:Up  r/F5:Refresh  q:Quit"
