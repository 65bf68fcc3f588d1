"""veNEAR balance accounting, event logs and a lockup contract model."""

__version__ = "1.0.2"