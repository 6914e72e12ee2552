"""Scoring, ranking, snippet extraction and highlighting over documents."""
