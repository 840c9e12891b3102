"""Clinical Narrative Builder: structured interventions to daily-note narratives."""

__version__ = "0.1.0"
