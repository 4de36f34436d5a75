"""
Interface HTTP (FastAPI).
"""
