"""Schema synthesis exports."""

from .schema_synthesizer import SchemaValue, render_schema_text, synthesize

__all__ = ["SchemaValue", "render_schema_text", "synthesize"]
