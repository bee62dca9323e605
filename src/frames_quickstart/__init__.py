"""frames-v2-quickstart - scaffold a Farcaster Frames v2 app from a template."""

__version__ = "0.1.0"
