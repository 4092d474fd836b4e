"""
Only the root tests directory carries an __init__.py; the subdirectories are plain
directories collected by pytest, so test module names must stay unique.
"""
