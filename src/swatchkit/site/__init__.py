"""Pattern library site: content scanning, layouts and page assembly."""
