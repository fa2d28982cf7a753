"""Client layer for the managed services REST APIs."""
