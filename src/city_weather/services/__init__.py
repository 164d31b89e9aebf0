"""
Shared utilities.

- http.py - ``requests.Session`` used by every datasource
"""
