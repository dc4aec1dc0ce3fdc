"""Core infrastructure for findr: paths, settings and theming."""
