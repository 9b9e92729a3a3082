"""Project snapshot decoding."""

from .reader import load_project, load_prompt_sessions, project_from_dict

__all__ = ["load_project", "load_prompt_sessions", "project_from_dict"]
