"""Program generators and renderers."""

from .fallback import GenerationResult, ProgramGenerator, ProgramSource, generate_program, program_from_payload
from .text import ProgramRenderer, RendererConfig, render_overview, render_week

__all__ = [
    "GenerationResult",
    "ProgramGenerator",
    "ProgramRenderer",
    "ProgramSource",
    "RendererConfig",
    "generate_program",
    "program_from_payload",
    "render_overview",
    "render_week",
]
