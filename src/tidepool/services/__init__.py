"""
Shared service utilities.

- http.py - ``requests`` session with a default timeout and optional retries
"""
