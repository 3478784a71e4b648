"""
Cross‑cutting pieces: configuration, logging and error handling.
"""
