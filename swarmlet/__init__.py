"""Composable LLM workflow pipelines built from model-call, tool-using and output nodes."""

__version__ = "0.1.0"