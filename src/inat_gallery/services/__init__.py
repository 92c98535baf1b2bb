"""
Shared service utilities.

- http.py - ``requests.Session`` used by every outbound call
"""
