# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing here is required: every setting has a default.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_LOG_DIR": "Directory for tasklist.log (default: .local/tasklist).",
    "TASKLIST_FILE_LOGGING": "Write the DEBUG log file (true/false, default: true).",
    # Task rules
    "TASKLIST_TITLE_MAX_LENGTH": "Maximum title length after trimming (default: 50).",
}
