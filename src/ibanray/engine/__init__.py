"""Rule pipeline, violations and display formatting."""
