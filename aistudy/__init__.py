"""AI Study: personalized study assistant client."""

__version__ = "0.3.0"
