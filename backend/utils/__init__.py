"""Utility modules."""

from .application_text import render_cover_letter, render_resume

__all__ = ["render_resume", "render_cover_letter"]
