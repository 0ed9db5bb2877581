"""
bookrank — Book catalog and sales ingestion with sales rankings.

Submodules:
    - core:      settings, database handle, errors
    - models:    books and sales tables
    - ingestion: catalog / sales file pipelines
    - reporting: rankings, window catalog, catalog listing
    - api:       FastAPI routers
"""

__version__ = "1.0.0"
