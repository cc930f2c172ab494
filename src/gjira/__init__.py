"""gjira.

Links a local git workflow to a Jira tracker:
- check out or create a branch named after an issue
- commit and push with a message built from the issue summary
- first-run wizard that persists tracker credentials
"""

__version__ = "0.1.0"

from gjira.config import GjiraSettings, TrackerSettings

__all__ = ["__version__", "GjiraSettings", "TrackerSettings"]
