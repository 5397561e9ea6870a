"""Record CI workflow runs per repository, seed sample data and read it back."""

__version__ = "0.1.0"
__all__ = ["__version__"]