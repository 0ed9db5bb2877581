"""
Core infrastructure: settings, database handle and errors
"""
