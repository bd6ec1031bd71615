"""elapsedctl — elapsed-time counter rendered as MONTHS / DAYS / HH:MM:SS."""

__version__ = "0.1.0"
