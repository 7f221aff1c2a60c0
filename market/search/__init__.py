"""
Keyword search over products, services and demands.

``normalizer`` holds the text match, ``filters`` the per-entity filter bags,
``engine`` the pure search functions and ``suggestions`` the alternative terms
offered when a cross-listing search finds nothing. ``services`` wires them to
the database.
"""
