# src/oq/cli/__init__.py
