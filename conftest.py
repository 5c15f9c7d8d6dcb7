"""Root pytest configuration (kept intentionally minimal).

The ``formkit`` package sits next to this file, so pytest's rootdir
already makes it importable without path manipulation.
"""

# Intentionally no path mangling here.
