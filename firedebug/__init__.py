"""Firedebug - toggles an analytics SDK's debug-mode flags for development builds.

The flags live in a persistent key-value store. They are reset and then set
according to the caller's wish, but only when the running application's
identifier marks it as a development flavor.
"""
