"""Benefits Calc - Employee benefits administration and cost projection."""

__version__ = "0.1.0"
