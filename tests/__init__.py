"""
Only the root tests directory keeps an __init__.py. Subdirectories under tests/
work as namespace packages (PEP 420), so test module basenames must stay unique.
"""
