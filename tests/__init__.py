"""
Only the root tests/ directory is a regular package, so helpers can be imported as
`tests.helpers...`. Test subdirectories are namespace packages and need no __init__.py.
"""
