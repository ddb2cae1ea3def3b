"""Infrastructure layer - concrete collaborators and wiring."""
