"""Order total calculation, persistence and notification behind pluggable collaborators."""
