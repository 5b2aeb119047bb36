"""
Query engine for listed log entries (after / contains / sort / paginate).
"""
