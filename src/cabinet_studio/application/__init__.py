"""Application layer - document format, prompt compiler, session and settings.

Submodules are imported directly (e.g. ``cabinet_studio.application.session``)
so the infrastructure exporters can depend on the document format without an
import cycle.
"""
