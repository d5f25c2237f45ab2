"""aic: AI-powered explanations of git history and commit message drafts."""

__version__ = "1.0.0"
