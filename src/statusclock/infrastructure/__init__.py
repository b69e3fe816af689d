"""Infrastructure layer - Babel-backed locale collaborators and caches."""
