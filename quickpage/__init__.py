"""quickpage: idea-to-page preview generation."""
