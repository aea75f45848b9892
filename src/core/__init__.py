"""Shared kernel: settings, Result, domain error values and the container.

Nothing in here imports from the domain, application or presentation
layers except the container, which is the composition root.
"""
