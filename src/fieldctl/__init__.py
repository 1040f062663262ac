"""fieldctl — value normalization toolkit for CMS custom fields."""

__version__ = "0.1.0"
