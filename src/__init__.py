"""
Package marker for source code under `src`.
It groups the store-locator core, the HTTP API, and the client under one stable import path.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
