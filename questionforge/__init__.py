"""Generate JLPT-style reading questions with Gemini, merge the output files and normalise the question JSON."""

__version__ = "0.1.0"