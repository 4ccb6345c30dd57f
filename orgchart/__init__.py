"""Organisational hierarchy validation and pay/reporting-line analytics."""

__version__ = "1.0.0"
