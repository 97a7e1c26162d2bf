"""
Greeting services.

The greeting page shows a visitor name taken from the ``nombre`` query
parameter and a background style fixed in configuration at startup.
"""
