"""postctl — front-matter blog post control CLI."""

__version__ = "0.3.0"
