"""
Package marker for source code under `src.client`.
It groups the HTTP client used by scripts and downstream tools to call the store-location API.
"""
