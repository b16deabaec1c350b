"""Aptitude Scoring Engine: grades cognitive-aptitude assessments into performance profiles."""

__version__ = "1.0.0"
