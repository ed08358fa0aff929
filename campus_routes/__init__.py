"""Top-level package for the campus route planner.

The graph engine lives in ``campus_routes.graph``: a separate-chaining
hashtable, a directed weighted graph stored in it, and Dijkstra's
algorithm for shortest paths and closest destinations. The loader,
backend façade and HTML front end wrap that engine for the app.
"""

__version__ = "0.1.0"
