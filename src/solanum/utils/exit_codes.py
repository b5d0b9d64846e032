"""
Exit codes for Solanum.

Zero means the user quit the session; every fatal error maps to its own
non-zero code so wrappers and scripts can tell failures apart.
"""

# Success (voluntary quit)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Broken configuration file or font
ERROR_CONFIG = 3

# Terminal could not be set up or drawn on
ERROR_TERMINAL = 4

# Rendering a tick took longer than the tick itself
ERROR_RENDER_OVERRUN = 5

# Keyboard input could not be read
ERROR_INPUT = 6


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_CONFIG: "ERROR_CONFIG",
        ERROR_TERMINAL: "ERROR_TERMINAL",
        ERROR_RENDER_OVERRUN: "ERROR_RENDER_OVERRUN",
        ERROR_INPUT: "ERROR_INPUT",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Session ended by the user",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_CONFIG: "Configuration or font file is broken",
        ERROR_TERMINAL: "Terminal error - check that a TTY is attached",
        ERROR_RENDER_OVERRUN: "Rendering took longer than one second per tick",
        ERROR_INPUT: "Keyboard input could not be read",
    }
    return descriptions.get(code, "Unknown error")
