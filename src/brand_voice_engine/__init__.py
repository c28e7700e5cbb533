"""Brand Voice Engine - learn a writer's voice, score content against it, refine it."""

__version__ = "0.1.0"
