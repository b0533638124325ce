import os

PROMPT = ":"

# Background pids the job table will track at once
MAX_BACKGROUND_JOBS = 1000

DEV_NULL = os.devnull
OUTPUT_FILE_MODE = 0o644
HOME_VAR = "HOME"

# last_foreground_status before any foreground command has run
NO_STATUS = None

ENTER_FG_ONLY = "Entering foreground-only mode (& is now ignored)"
EXIT_FG_ONLY = "Exiting foreground-only mode"
