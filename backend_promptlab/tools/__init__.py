"""Command-line tools for Backend PromptLab."""
