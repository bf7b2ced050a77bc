"""Structured JSONL records of pipeline runs."""

from .jsonl import append_jsonl
from .run_logger import PipelineRunLogger

__all__ = ["PipelineRunLogger", "append_jsonl"]
