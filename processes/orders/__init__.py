"""Order log ranking process package.

Reads a dining-hall order log, validates and aggregates it, and ranks menu
items by how often they were ordered. The pipeline runs
file gate → line parser → aggregator → ranker and fails fast on the first
error.

CLI usage is available via `python -m processes.orders`.
"""
