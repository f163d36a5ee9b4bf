"""Template materialization: copy, placeholder substitution and workflow."""
