"""quickadd — append tasks to today's Obsidian daily note."""

__version__ = "0.3.1"
