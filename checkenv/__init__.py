"""checkenv: report process.env variables referenced in source but missing from the environment."""

__version__ = "0.1.0"
