"""Profile overrides selected by SPEEDO_ENV (see config/__init__.py)."""
