"""periodpick - period calculus for year/month range pickers."""

__version__ = "0.1.0"
