"""Distance metrics. Each module registers one metric with ``@metric``."""
