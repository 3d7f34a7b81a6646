# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing here is required; every variable has a default.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKDECK_APP_NAME": "App display name used in logs (default: taskdeck).",
    "TASKDECK_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    "TASKDECK_DATA_DIR": "Local directory for taskdeck.log (default: .local/taskdeck).",
    # Session
    "TASKDECK_MAX_NEW_TASKS": "How many tasks one session may add (default: 3).",
    "TASKDECK_VALID_STATUSES": (
        "Comma separated accepted statuses, subset of: todo, in progress, done (default: all)."
    ),
    "TASKDECK_SEED_TASKS": "Start with the three sample tasks (true/false, default: true).",
    # Console
    "TASKDECK_ICONS": "Decorative icons in console output (true/false, default: true).",
}
