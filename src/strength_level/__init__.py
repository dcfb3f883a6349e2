"""strength-level: classify squat, bench and deadlift strength against population standards."""

__version__ = "0.1.0"
