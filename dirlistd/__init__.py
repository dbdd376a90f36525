"""HTTP daemon exposing directory listings."""
