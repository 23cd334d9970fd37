"""Demo data generation for WorkSync.

Seeds a small team (one manager, two employees) with a couple of shifts
so that a fresh installation has something to show.

Usage:
    worksync seed-demo
    # or
    python -m worksync_demo.seed
"""

__version__ = "0.1.0"
