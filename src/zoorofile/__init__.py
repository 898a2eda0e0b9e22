"""Weekly GitHub activity pet for your profile README."""

__version__ = "0.1.0"
