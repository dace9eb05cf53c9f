"""Core SwatchKit functionality: configuration, build orchestration, watch mode, scaffolding."""
