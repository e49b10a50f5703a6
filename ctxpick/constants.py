"""
Constants
"""

PROMPT_TITLE = "(ctxpick) Add a file"

# Picker back-ends, see ctxpick.pickers
PROVIDERS = ("native", "fzf", "prompt_toolkit")
DEFAULT_PROVIDER = "native"
