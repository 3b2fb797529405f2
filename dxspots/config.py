import os

# Cleaned lines longer than this are reported unrecognized without running any rule
MAX_LINE_LENGTH = int(os.getenv("DXSPOTS_MAX_LINE_LENGTH", "1024"))
