"""Version information for a11y-heuristics."""

__version__ = "1.0.0"

# Package metadata
__title__ = "a11y-heuristics"
__description__ = "Pattern-based accessibility checks for markup fragments"
__license__ = "MIT"
