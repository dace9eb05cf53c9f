"""Design token compilation: custom properties, fluid clamps, utility classes, token pages."""
