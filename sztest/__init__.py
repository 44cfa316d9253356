"""Test helpers: marked-up diffs, range checks, a failure-collecting checker and a test clock."""

__version__ = "0.1.0"
__all__ = ["bounds", "checker", "clock", "diff", "diff_fmt"]