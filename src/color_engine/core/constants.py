"""Shared constants for color parsing and terminal output."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
BOLD = f"{CSI}1m"
UNDERLINE = f"{CSI}4m"

# Named colors accepted by the string parser, mapped to hex literals
NAMED_COLORS: dict[str, str] = {
    "red": "#ff0000",
    "blue": "#0000ff",
    "green": "#00ff00",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "black": "#000000",
    "white": "#ffffff",
    "gray": "#808080",
}

# Channel and alpha ranges
CHANNEL_MIN = 0
CHANNEL_MAX = 255
ALPHA_MIN = 0.0
ALPHA_MAX = 1.0

# 256-color palette layout
CUBE_OFFSET = 16        # 6x6x6 cube occupies 16-231
CUBE_WHITE = 231
GRAY_RAMP_OFFSET = 232  # 24-step grayscale ramp occupies 232-255
GRAY_RAMP_STEPS = 24
