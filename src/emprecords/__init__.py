"""emprecords — employee and user records with validated, audited writes."""

__version__ = "0.1.0"
