# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting without opening config.py.
"""

ENV_VARS = {
    # App / logging
    "TASKFLOW_APP_NAME": "App display name (default: sunrise-taskflow).",
    "TASKFLOW_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "TASKFLOW_LOG_DIR": "Directory for taskflow.log (default: .local/taskflow).",
    # HTTP server
    "TASKFLOW_HOST": "Bind address (default: 127.0.0.1).",
    "TASKFLOW_PORT": "Bind port (default: 8080).",
    "TASKFLOW_DEBUG": "Run Flask in debug mode (true/false, default: false).",
    # Greeting counter
    "TASKFLOW_COUNTER_START": "Initial value of the /hello and /world counter (default: 100; tests use 0).",
}
