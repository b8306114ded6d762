"""startup-metrics: extract and compare startup milestones from application logs."""

__version__ = "0.1.0"
