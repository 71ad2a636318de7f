"""project-knowledge - heuristic convention analyzer for C#/TypeScript codebases."""

__version__ = "1.0.0"
