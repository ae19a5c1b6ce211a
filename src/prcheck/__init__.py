"""PR Completeness Check - fail pull requests that lack a milestone, assignees or labels."""

__version__ = "0.1.0"
