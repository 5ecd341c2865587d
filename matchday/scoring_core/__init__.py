"""
Pure scoring logic: point calculation, conditional rules and statistics
aggregation. Nothing in this package touches the database.
"""
