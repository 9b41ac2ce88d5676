"""Infrastructure layer - storage engines, repositories and wiring."""
