"""Renderers for each cf-* tag kind, grouped by family."""
