"""Command-line tools for cgd.

- ``python -m src.cli uscc`` -- unified social credit codes (Credit China)
- ``python -m src.cli cninfo`` -- stock codes and top shareholders (CNINFO)

The same entry point is installed as the ``cgd`` console script.
"""
