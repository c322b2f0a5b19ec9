# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "KEVIN_APP_NAME": "Bot name used in greetings and the window title (default: Kevin).",
    "KEVIN_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Shell
    "KEVIN_UI": "console or gui (default: console). Overridden by --console / --gui.",
    # Paths
    "KEVIN_DATA_DIR": "Local data directory (default: ./data).",
    "KEVIN_DATA_FILE": "Task file (default: <data_dir>/duke.txt). Overridden by --file.",
    "KEVIN_LOG_DIR": "Directory for kevin.log (default: <data_dir>).",
}
