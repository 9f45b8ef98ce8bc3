"""CLI output: JSON or Rich-rendered text for an ActionResponse."""
