"""
Adaptateur CLI (Typer + Rich) pour m3u-catalog.
"""
