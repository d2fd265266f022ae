#!/usr/bin/env python3
"""
PR Change Request Metrics
Collects per-user change-request statistics for a repository and renders them as charts.
"""

from pr_change_metrics.cli import main


if __name__ == "__main__":
    main()
