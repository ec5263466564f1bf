"""
web - HTTP API для Peg Thing.
"""
