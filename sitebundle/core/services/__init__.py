"""Services — resolution, installation checks and entry-point generation."""
