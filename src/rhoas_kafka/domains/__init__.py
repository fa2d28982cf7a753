"""Resource domains of the managed services APIs."""
